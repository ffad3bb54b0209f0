# WORKFLOW: Core configuration management for the trade document converter.
# Used by: All modules throughout the application
# Configuration includes:
# - Conversion policy (lenient mandatory fields, partial output on errors)
# - Output and error report directories
# - Document type detection thresholds (base floor, margin, filename hint)
# - Header mapping similarity threshold
# - Country / unit-of-measure catalog overlays
# - API settings (CORS, upload size) and logging configuration
#
# Loaded at startup and used by all services for consistent configuration.

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Conversion policy
    allow_empty_mandatory_fields: bool = False
    write_output_on_validation_error: bool = False

    # Output locations
    output_dir: str = "./data/converted"
    error_report_dir: str = "./data/error_reports"

    # Detection
    detection_base_threshold: float = 75.0
    detection_min_margin: float = 0.0
    filename_hint_bonus: float = 15.0

    # Header mapping
    header_similarity_threshold: float = 0.6

    # Catalogs
    country_catalog_path: Optional[str] = None
    uom_catalog_path: Optional[str] = None
    disable_catalog_overlay: bool = False
    validate_uom_codes: bool = False

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Trade Document Converter"
    version: str = "1.0.0"
    max_upload_size_mb: int = 20

    # Environment
    environment: str = "development"
    debug: bool = True

    # Logging
    log_level: str = "INFO"

    # CORS
    allowed_origins: list[str] = ["*"]
    allowed_methods: list[str] = ["*"]
    allowed_headers: list[str] = ["*"]

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8001

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
