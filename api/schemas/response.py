# WORKFLOW: Pydantic response schemas for the conversion API.
# Used by: API routers, API tests
# Schemas include:
# 1. DocumentTypeInfo - One registered document type with its output formats
# 2. DetectionResponse - Detected doc type of an uploaded file
# 3. ConversionResponse - ConversionResult as returned to clients
# 4. ErrorResponse - Structural failure body (message + errorType)
#
# Response flow: Service objects -> Pydantic model -> JSON response

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class DocumentTypeInfo(BaseModel):
    doc_type: str
    description: str
    file_prefixes: List[str]
    allowed_formats: List[str]
    default_format: str
    line_length: int


class DocumentTypesResponse(BaseModel):
    document_types: List[DocumentTypeInfo]


class DetectionResponse(BaseModel):
    file_name: str
    document_type: str


class ConversionResponse(BaseModel):
    file_name: str
    status: str
    document_type: Optional[str] = None
    output_format: Optional[str] = None
    output_path: Optional[str] = None
    error_report_path: Optional[str] = None
    record_count: int = 0
    errors: List[Dict[str, Any]] = Field(default_factory=list)
    error_message: Optional[str] = None


class ErrorResponse(BaseModel):
    message: str
    errorType: str
