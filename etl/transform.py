# WORKFLOW: Normalize parsed records before validation.
# Used by: ConversionService
# Functions:
# 1. normalize_hts() - 10-digit HTS codes to ####.##.####
# 2. normalize_indicator() - Yes/No style indicator to Y, N or blank
# 3. normalize_net_cost() - Noisy CN / NO values to the bare code
# 4. coerce_date() - date objects, YYYYMMDD, separated digits, Excel serials
# 5. DocumentTransformer.transform() - Apply the field rules to every record
#
# Transform flow: indicator -> producer -> enums -> HTS / country / UOM / net cost -> dates
#                 -> conditional masking -> part numbers
# Rules are selected by FieldSpec type, possible values and role, never by document type.
# Applying the transform twice yields the same records.

"""
Record normalization for parsed trade documents.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional

from catalogs.country_catalog import CountryCatalog, get_country_catalog
from catalogs.uom_catalog import UOMCatalog, get_uom_catalog
from etl.parsers import ParsedDocument, clean_text, is_blank, parse_yyyymmdd
from registry.models import FieldRole, FieldSpec, FieldType, RegistryEntry

logger = logging.getLogger(__name__)

HTS_FORMATTED_RE = re.compile(r"^\d{4}\.\d{2}\.\d{4}$")
_NON_DIGIT_RE = re.compile(r"\D")
_NON_LETTER_RE = re.compile(r"[^A-Z]")

EXCEL_EPOCH = date(1899, 12, 30)

_INDICATOR_YES = {"YES", "Y"}
_INDICATOR_NO = {"NO", "N"}


def normalize_hts(value):
    """
    Format an HTS code as ``####.##.####``.

    Args:
        value: HTS code with or without separators

    Returns:
        Dotted code when the value holds exactly 10 digits, else the trimmed input
    """
    if value is None:
        return None
    raw = clean_text(value)
    if HTS_FORMATTED_RE.match(raw):
        return raw
    digits = _NON_DIGIT_RE.sub("", raw)
    if len(digits) != 10:
        return raw
    return f"{digits[:4]}.{digits[4:6]}.{digits[6:]}"


def normalize_indicator(value) -> str:
    text = clean_text(value).upper()
    if text in _INDICATOR_YES:
        return "Y"
    if text in _INDICATOR_NO:
        return "N"
    return ""


def normalize_net_cost(value):
    if value is None:
        return None
    raw = clean_text(value).upper()
    compact = _NON_LETTER_RE.sub("", raw)
    if compact in ("CN", "NO"):
        return compact
    return raw


def coerce_date(value) -> Optional[date]:
    """
    Coerce a cell to a calendar date.

    Accepts date/datetime objects, ``YYYYMMDD``, year-first dates with
    separators (``2025-08-01``) and Excel serial day numbers counted from
    1899-12-30. Anything else, including impossible dates, gives None.
    """
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = clean_text(value)
    if re.match(r"^\d{8}$", text):
        return parse_yyyymmdd(text)

    digits = _NON_DIGIT_RE.sub("", text)
    if len(digits) == 8 and digits != text:
        parsed = parse_yyyymmdd(digits)
        if parsed is not None:
            return parsed

    try:
        serial = float(text)
    except ValueError:
        return None
    if serial <= 0:
        return None
    try:
        return EXCEL_EPOCH + timedelta(days=int(serial))
    except OverflowError:
        return None


def match_enum(value, spec: FieldSpec) -> Optional[str]:
    """Code whose code or description equals ``value`` (case-insensitive)."""
    upper = clean_text(value).upper()
    if not upper:
        return None
    for code, description in spec.enum_pairs():
        if upper == code.upper() or (description and upper == description.upper()):
            return code
    return None


class DocumentTransformer:
    """Applies the field normalization rules with injected catalogs."""

    def __init__(
        self,
        country_catalog: Optional[CountryCatalog] = None,
        uom_catalog: Optional[UOMCatalog] = None,
    ):
        self.country_catalog = country_catalog or get_country_catalog()
        self.uom_catalog = uom_catalog or get_uom_catalog()

    def normalize_country(self, value):
        if value is None:
            return None
        raw = clean_text(value)
        upper = raw.upper()
        if len(upper) == 2 and self.country_catalog.is_valid_code(upper):
            return upper
        return self.country_catalog.name_to_code(raw) or raw

    def transform(self, document: ParsedDocument, entry: RegistryEntry) -> ParsedDocument:
        """
        Normalize every record of ``document`` in place.

        Args:
            document: Parsed records (canonical keys)
            entry: Registry entry of the document type

        Returns:
            The same document
        """
        changed = 0
        for record in document.records:
            before = dict(record)
            self.transform_record(record, entry)
            if record != before:
                changed += 1
        logger.info(
            f"Transformed {len(document.records)} {entry.doc_type.value} records ({changed} changed)"
        )
        return document

    def transform_record(self, record: Dict[str, Any], entry: RegistryEntry) -> Dict[str, Any]:
        group = entry.conditional_group
        indicator_active = False
        for spec in entry.fields_with_role(FieldRole.INDICATOR):
            if spec.data_element in record:
                record[spec.data_element] = normalize_indicator(record[spec.data_element])
        if group is not None:
            indicator_active = record.get(group.indicator) == group.active_value

        for spec in entry.schema_spec:
            name = spec.data_element
            value = record.get(name)
            if is_blank(value) or spec.role == FieldRole.INDICATOR:
                continue

            if spec.role == FieldRole.PRODUCER and indicator_active:
                upper = clean_text(value).upper()
                if upper == "YES":
                    record[name] = "Yes"
                    continue
                if upper == "NO":
                    record[name] = "No (1)"
                    continue

            if spec.possible_values:
                code = match_enum(value, spec)
                if code is not None:
                    record[name] = code

            if spec.role == FieldRole.HTS_CODE:
                record[name] = normalize_hts(record[name])
            elif spec.role == FieldRole.COUNTRY:
                record[name] = self.normalize_country(record[name])
            elif spec.role == FieldRole.UOM:
                record[name] = self.uom_catalog.normalize(record[name])
            elif spec.role == FieldRole.NET_COST:
                record[name] = normalize_net_cost(record[name])

            if spec.type == FieldType.DATE:
                record[name] = coerce_date(record[name])

        if group is not None and not indicator_active:
            for name in group.dependents:
                if name in record:
                    record[name] = ""

        for spec in entry.fields_with_role(FieldRole.PART_NUMBER):
            value = record.get(spec.data_element)
            if value:
                record[spec.data_element] = str(value).upper()

        return record


def transform(document: ParsedDocument, entry: RegistryEntry) -> ParsedDocument:
    return DocumentTransformer().transform(document, entry)
