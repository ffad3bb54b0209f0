# WORKFLOW: Conversion service that runs one file through the whole pipeline.
# Used by: API /convert endpoint, scripts.convert_file
# Functions:
# 1. convert() - Resolve type -> parse -> transform -> validate -> serialize
# 2. _resolve_document_type() - Explicit type, content detection, optional prefix fallback
# 3. _write_error_report() - JSON error report next to the converted output
#
# Conversion flow: bytes + file name -> parser selection -> doc type -> output format check
#                  -> records -> normalized records -> validation errors -> output file + report
# Structural failures (format, type, ambiguity) are raised as ConversionError;
# anything else that breaks a single file becomes a "failed" result.

import json
import os
from enum import Enum
from typing import Any, Dict, List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from core.config import settings
from core.exceptions import AmbiguousDocumentType, ConversionError
from etl.detector import DocumentDetector
from etl.parsers import get_parser
from etl.serializer import write_output
from etl.transform import DocumentTransformer
from etl.validators import DocumentValidator, generate_validation_report
from registry.document_registry import DocumentRegistry, get_registry

logger = structlog.get_logger()


class ConversionStatus(str, Enum):
    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    FAILED = "failed"


class ConversionResult(BaseModel):
    """Outcome of converting one file."""

    model_config = ConfigDict(frozen=True)

    status: ConversionStatus
    output_path: Optional[str] = None
    error_report_path: Optional[str] = None
    document_type: Optional[str] = None
    output_format: Optional[str] = None
    record_count: int = 0
    errors: List[Dict[str, Any]] = Field(default_factory=list)
    error_message: Optional[str] = None


class ConversionService:
    """Runs the conversion pipeline with injected registry and stages."""

    def __init__(
        self,
        registry: Optional[DocumentRegistry] = None,
        detector: Optional[DocumentDetector] = None,
        transformer: Optional[DocumentTransformer] = None,
        validator: Optional[DocumentValidator] = None,
        output_dir: Optional[str] = None,
        error_report_dir: Optional[str] = None,
        write_output_on_validation_error: Optional[bool] = None,
    ):
        self.registry = registry or get_registry()
        self.detector = detector or DocumentDetector(registry=self.registry)
        self.transformer = transformer or DocumentTransformer()
        self.validator = validator or DocumentValidator()
        self.output_dir = output_dir or settings.output_dir
        self.error_report_dir = error_report_dir or settings.error_report_dir
        self.write_output_on_validation_error = (
            settings.write_output_on_validation_error
            if write_output_on_validation_error is None
            else write_output_on_validation_error
        )

    def _resolve_document_type(
        self, buffer: bytes, file_name: str, document_type: Optional[str], allow_prefix_fallback: bool
    ) -> str:
        if document_type:
            return self.registry.get_entry(document_type).doc_type.value

        detected = self.detector.detect(buffer, file_name)
        if detected:
            return detected

        if allow_prefix_fallback:
            detected = self.detector.detect_by_prefix(file_name)
            if detected:
                logger.info("Document type taken from file prefix", file_name=file_name, document_type=detected)
                return detected

        raise AmbiguousDocumentType(
            f"Could not determine the document type of '{file_name}'. Please select the document type.",
            file_name=file_name,
        )

    def _write_error_report(self, file_name: str, report: List[Dict[str, Any]]) -> str:
        os.makedirs(self.error_report_dir, exist_ok=True)
        base = os.path.splitext(os.path.basename(file_name))[0]
        path = os.path.join(self.error_report_dir, f"{base}-errors.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        return path

    def convert(
        self,
        buffer: bytes,
        file_name: str,
        output_format: Optional[str] = None,
        document_type: Optional[str] = None,
        allow_prefix_fallback: bool = False,
    ) -> ConversionResult:
        """
        Convert one uploaded file.

        Args:
            buffer: File content
            file_name: Original file name (extension selects the parser)
            output_format: Requested output format; the type's default when omitted
            document_type: Known doc type key or prefix; detected from content when omitted
            allow_prefix_fallback: Use the file name prefix when detection abstains

        Returns:
            ConversionResult with the output and error report paths

        Raises:
            UnsupportedFormat: If no parser handles the file extension
            UnknownDocumentType: If ``document_type`` is not registered
            AmbiguousDocumentType: If the type cannot be determined
            IncompatibleOutputFormat: If the type cannot be exported to ``output_format``
        """
        parser = get_parser(file_name)
        log = logger.bind(file_name=file_name)
        doc_type, fmt = None, None

        try:
            doc_type = self._resolve_document_type(buffer, file_name, document_type, allow_prefix_fallback)
            entry = self.registry.get_entry(doc_type)
            fmt = self.registry.validate_output_format(doc_type, output_format)
            log = log.bind(document_type=doc_type, output_format=fmt.value)
            log.info("Conversion started")

            document = parser.parse(buffer, entry)
            self.transformer.transform(document, entry)
            errors = self.validator.validate(document, entry)
            report = generate_validation_report(errors)

            output_path = None
            if not errors or self.write_output_on_validation_error:
                output_path = write_output(document, entry, fmt, file_name, self.output_dir)

            error_report_path = self._write_error_report(file_name, report) if report else None
        except ConversionError:
            raise
        except Exception as e:
            log.error("Conversion failed", error_type=type(e).__name__, error_message=str(e))
            return ConversionResult(
                status=ConversionStatus.FAILED,
                document_type=doc_type,
                output_format=fmt.value if fmt else None,
                error_message=str(e),
            )

        status = ConversionStatus.COMPLETED_WITH_ERRORS if errors else ConversionStatus.COMPLETED
        log.info(
            "Conversion finished",
            status=status.value,
            record_count=len(document.records),
            error_count=len(errors),
            output_path=output_path,
        )
        return ConversionResult(
            status=status,
            output_path=output_path,
            error_report_path=error_report_path,
            document_type=doc_type,
            output_format=fmt.value,
            record_count=len(document.records),
            errors=report,
        )
