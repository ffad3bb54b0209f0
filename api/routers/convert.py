# WORKFLOW: Conversion endpoints for uploaded trade documents.
# Used by: Web front end, integration clients
# Endpoints:
# 1. /document-types - Registered document types with their output formats
# 2. /detect - Detect the document type of an uploaded file
# 3. /convert - Convert an uploaded file (optional explicit type and format)
#
# Request flow: Multipart upload -> size check -> ConversionService / DocumentDetector -> JSON response
# Structural failures (ConversionError) map to 400 with {"message", "errorType"};
# validation problems come back inside a successful response.

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
import logging

from api.schemas.response import (
    ConversionResponse,
    DetectionResponse,
    DocumentTypeInfo,
    DocumentTypesResponse,
)
from core.config import settings
from core.exceptions import AmbiguousDocumentType, ConversionError
from etl.detector import DocumentDetector
from etl.parsers import get_parser
from registry.document_registry import get_registry
from services.converter import ConversionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["conversion"])


def get_conversion_service() -> ConversionService:
    """Conversion service dependency (overridden in tests)."""
    return ConversionService()


def get_detector() -> DocumentDetector:
    return DocumentDetector()


async def _read_upload(file: UploadFile) -> bytes:
    buffer = await file.read()
    limit = settings.max_upload_size_mb * 1024 * 1024
    if len(buffer) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB upload limit",
        )
    if not buffer:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty")
    return buffer


def _bad_request(error: ConversionError) -> HTTPException:
    logger.warning(f"{error.error_type}: {error.message}")
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.to_dict())


@router.get("/document-types", response_model=DocumentTypesResponse)
async def list_document_types():
    """List the registered document types."""
    registry = get_registry()
    return DocumentTypesResponse(
        document_types=[
            DocumentTypeInfo(
                doc_type=entry.doc_type.value,
                description=entry.description,
                file_prefixes=list(entry.file_prefixes),
                allowed_formats=[fmt.value for fmt in entry.allowed_formats],
                default_format=entry.default_format.value,
                line_length=entry.line_length,
            )
            for entry in registry.entries()
        ]
    )


@router.post("/detect", response_model=DetectionResponse)
async def detect_document_type(
    file: UploadFile = File(...),
    detector: DocumentDetector = Depends(get_detector),
):
    """
    Detect the document type of an uploaded file.

    Returns 400 with errorType AMBIGUITY_DETECTED when no type is a confident
    match, so the client can ask the user to pick one.
    """
    buffer = await _read_upload(file)
    file_name = file.filename or ""
    try:
        get_parser(file_name)
        document_type = detector.detect(buffer, file_name)
        if document_type is None:
            raise AmbiguousDocumentType(
                f"Could not determine the document type of '{file_name}'. Please select the document type.",
                file_name=file_name,
            )
    except ConversionError as e:
        raise _bad_request(e)

    return DetectionResponse(file_name=file_name, document_type=document_type)


@router.post("/convert", response_model=ConversionResponse)
async def convert_document(
    file: UploadFile = File(...),
    output_format: Optional[str] = Form(None),
    document_type: Optional[str] = Form(None),
    service: ConversionService = Depends(get_conversion_service),
):
    """
    Convert an uploaded document.

    The document type is detected from content unless ``document_type`` is
    given; ``output_format`` defaults to the type's default format.
    """
    buffer = await _read_upload(file)
    file_name = file.filename or ""
    logger.info(f"Convert request: file={file_name}, format={output_format}, type={document_type}")

    try:
        result = service.convert(
            buffer,
            file_name,
            output_format=output_format or None,
            document_type=document_type or None,
        )
    except ConversionError as e:
        raise _bad_request(e)

    return ConversionResponse(file_name=file_name, **result.model_dump(mode="json"))
