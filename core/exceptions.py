# WORKFLOW: Typed failures raised by the conversion pipeline.
# Used by: Registry, parsers, detector, conversion service, API routers
# Exceptions:
# 1. UnsupportedFormat - input extension not handled by any parser
# 2. UnknownDocumentType - doc type or file prefix not in the registry
# 3. AmbiguousDocumentType - detector could not pick a schema with confidence
# 4. IncompatibleOutputFormat - requested output format not allowed for the type
#
# Per-record integrity and business-rule problems are never raised; they are
# collected as ValidationError entries by etl.validators.

"""
Exception hierarchy for the trade document conversion pipeline.
"""

from typing import Optional


class ConversionError(Exception):
    """Base class for structural conversion failures."""

    error_type = "CONVERSION_ERROR"

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.file_name = file_name

    def to_dict(self) -> dict:
        return {"message": self.message, "errorType": self.error_type}


class UnsupportedFormat(ConversionError):
    error_type = "UNSUPPORTED_FORMAT"


class UnknownDocumentType(ConversionError):
    error_type = "UNKNOWN_DOCUMENT_TYPE"


class AmbiguousDocumentType(ConversionError):
    """Raised when content detection abstains; the caller should ask for a type."""

    error_type = "AMBIGUITY_DETECTED"


class IncompatibleOutputFormat(ConversionError):
    error_type = "INCOMPATIBLE_OUTPUT_FORMAT"
