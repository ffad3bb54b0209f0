# WORKFLOW: Data validation for converted trade documents.
# Used by: ConversionService
# Functions:
# 1. DocumentValidator.validate_integrity() - Mandatory fields, enum codes, HTS format, catalogs
# 2. DocumentValidator.apply_business_rules() - Cross-field rules registered per document type
# 3. DocumentValidator.validate() - Integrity first; business rules only when integrity is clean
# 4. validate() - Module-level shortcut with the process-wide catalogs
#
# Validation flow: Transformed records -> Integrity checks -> Business rules -> List[ValidationError]
# Problems are returned as data (the error report), never raised.

"""
Data validation for converted trade documents.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from catalogs.country_catalog import CountryCatalog, get_country_catalog
from catalogs.uom_catalog import UOMCatalog, get_uom_catalog
from core.config import settings
from etl.parsers import ParsedDocument, Record, is_blank
from etl.transform import HTS_FORMATTED_RE
from registry.finished_product import NAFTA_FIELD
from registry.models import DocumentType, FieldRole, RegistryEntry

logger = logging.getLogger(__name__)

HTS_EXAMPLE = "9019.10.9999"
NET_COST_CODES = ["CN", "NO"]


class ErrorKind(str, Enum):
    INTEGRITY = "Integrity Error"
    BUSINESS_RULE = "Business Rule Violation"


class ValidationError(BaseModel):
    kind: ErrorKind
    message: str
    field: Optional[str] = None
    row: Optional[int] = None
    value: Optional[Any] = None
    expected: Optional[Any] = None

    def to_report(self) -> Dict[str, Any]:
        report = {"type": self.kind.value, "message": self.message}
        report.update(self.model_dump(mode="json", exclude={"kind", "message"}, exclude_none=True))
        return report


def row_number(index: int) -> int:
    """1-based spreadsheet row of a record (the header is row 1)."""
    return index + 2


# ---------------------------------------------------------------------------
# Business rules
# ---------------------------------------------------------------------------

BusinessRule = Callable[[Record, int], List[ValidationError]]


def _rule_error(field: str, row: int, message: str, **extra) -> ValidationError:
    return ValidationError(
        kind=ErrorKind.BUSINESS_RULE,
        message=f"Row {row}: {message}",
        field=field,
        row=row,
        **extra,
    )


def fda_product_code_rule(record: Record, row: int) -> List[ValidationError]:
    """FDA Product Code is mandatory when the FDA Marker is FD2."""
    if record.get("FDA Marker") == "FD2" and is_blank(record.get("FDA Product Code")):
        return [
            _rule_error(
                "FDA Product Code", row, '"FDA Product Code" is mandatory when "FDA Marker" is "FD2".'
            )
        ]
    return []


def nafta_certificate_rule(record: Record, row: int) -> List[ValidationError]:
    """
    Certificate-of-origin data required when NAFTA is Y.

    Each missing piece is a separate error: Preference Criterion,
    Net Cost (CN or NO), Period (From), Period (To).
    """
    if record.get(NAFTA_FIELD) != "Y":
        return []

    errors = []
    if is_blank(record.get("Preference Criterion")):
        errors.append(
            _rule_error(
                "Preference Criterion", row, '"Preference Criterion" is mandatory when "NAFTA" is "Y".'
            )
        )

    net_cost = record.get("Net Cost")
    net_cost_code = "" if is_blank(net_cost) else str(net_cost).strip().upper()
    if net_cost_code not in NET_COST_CODES:
        errors.append(
            _rule_error(
                "Net Cost",
                row,
                f'When "NAFTA" is "Y", "Net Cost" must be "CN" or "NO". Got "{net_cost if net_cost is not None else ""}".',
                value=net_cost,
                expected=NET_COST_CODES,
            )
        )

    for period in ("Period (From)", "Period (To)"):
        if is_blank(record.get(period)):
            errors.append(_rule_error(period, row, f'"{period}" is mandatory when "NAFTA" is "Y".'))
    return errors


BUSINESS_RULES: Dict[DocumentType, List[BusinessRule]] = {
    DocumentType.FINISHED_PRODUCT: [fda_product_code_rule, nafta_certificate_rule],
}


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

class DocumentValidator:
    """Integrity and business-rule checks with injected catalogs and policy."""

    def __init__(
        self,
        country_catalog: Optional[CountryCatalog] = None,
        uom_catalog: Optional[UOMCatalog] = None,
        allow_empty_mandatory_fields: Optional[bool] = None,
        validate_uom_codes: Optional[bool] = None,
        business_rules: Optional[Dict[DocumentType, List[BusinessRule]]] = None,
    ):
        self.country_catalog = country_catalog or get_country_catalog()
        self.uom_catalog = uom_catalog or get_uom_catalog()
        self.allow_empty_mandatory_fields = (
            settings.allow_empty_mandatory_fields
            if allow_empty_mandatory_fields is None
            else allow_empty_mandatory_fields
        )
        self.validate_uom_codes = (
            settings.validate_uom_codes if validate_uom_codes is None else validate_uom_codes
        )
        self.business_rules = BUSINESS_RULES if business_rules is None else business_rules

    def validate_integrity(self, document: ParsedDocument, entry: RegistryEntry) -> List[ValidationError]:
        """
        Check every record against the schema.

        Args:
            document: Transformed records
            entry: Registry entry of the document type

        Returns:
            Integrity errors (empty when the document is clean)
        """
        if not document.records:
            return [ValidationError(kind=ErrorKind.INTEGRITY, message="No records found to validate.")]

        errors: List[ValidationError] = []
        for index, record in enumerate(document.records):
            row = row_number(index)
            for spec in entry.schema_spec:
                name = spec.data_element
                value = record.get(name)

                if is_blank(value):
                    if spec.is_mandatory and not self.allow_empty_mandatory_fields:
                        errors.append(
                            ValidationError(
                                kind=ErrorKind.INTEGRITY,
                                message=f'Row {row}: Mandatory field "{name}" is missing or empty.',
                                field=name,
                                row=row,
                            )
                        )
                    continue

                text = str(value).strip()
                codes = spec.enum_codes
                if codes is not None and text not in codes:
                    errors.append(
                        ValidationError(
                            kind=ErrorKind.INTEGRITY,
                            message=(
                                f'Row {row}: Field "{name}" has an invalid value "{value}". '
                                f"Expected one of: {', '.join(codes)}"
                            ),
                            field=name,
                            row=row,
                            value=value,
                            expected=codes,
                        )
                    )

                if spec.role == FieldRole.HTS_CODE and not HTS_FORMATTED_RE.match(text):
                    errors.append(
                        ValidationError(
                            kind=ErrorKind.INTEGRITY,
                            message=(
                                f'Row {row}: Field "{name}" must match format ####.##.#### '
                                f'(e.g., {HTS_EXAMPLE}). Got "{value}".'
                            ),
                            field=name,
                            row=row,
                            value=value,
                            expected="####.##.####",
                        )
                    )
                elif spec.role == FieldRole.COUNTRY and not self.country_catalog.is_valid_code(text):
                    errors.append(
                        ValidationError(
                            kind=ErrorKind.INTEGRITY,
                            message=f'Row {row}: "{name}" must be a valid 2-letter code from catalog. Got "{value}".',
                            field=name,
                            row=row,
                            value=value,
                        )
                    )
                elif (
                    spec.role == FieldRole.UOM
                    and self.validate_uom_codes
                    and not self.uom_catalog.is_valid_code(text)
                ):
                    errors.append(
                        ValidationError(
                            kind=ErrorKind.INTEGRITY,
                            message=f'Row {row}: "{name}" must be a unit of measure code from catalog. Got "{value}".',
                            field=name,
                            row=row,
                            value=value,
                        )
                    )

        logger.info(f"Integrity validation of {entry.doc_type.value}: {len(errors)} errors found")
        return errors

    def apply_business_rules(self, document: ParsedDocument, entry: RegistryEntry) -> List[ValidationError]:
        rules = self.business_rules.get(entry.doc_type, [])
        errors: List[ValidationError] = []
        for index, record in enumerate(document.records):
            row = row_number(index)
            for rule in rules:
                errors.extend(rule(record, row))
        logger.info(f"Business rules for {entry.doc_type.value}: {len(errors)} violations found")
        return errors

    def validate(self, document: ParsedDocument, entry: RegistryEntry) -> List[ValidationError]:
        errors = self.validate_integrity(document, entry)
        if errors:
            return errors
        return self.apply_business_rules(document, entry)


def validate(document: ParsedDocument, entry: RegistryEntry) -> List[ValidationError]:
    return DocumentValidator().validate(document, entry)


def generate_validation_report(errors: List[ValidationError]) -> List[Dict[str, Any]]:
    """Error report entries in the order they were found."""
    return [error.to_report() for error in errors]
