# WORKFLOW: Render validated records as fixed-width text or delimited output.
# Used by: ConversionService
# Functions:
# 1. format_value() - One value per its FieldSpec (fixed point, dates, text)
# 2. to_fixed_width() - One line per record, fields padded/truncated to their length
# 3. to_csv() - Declared column order, first populated candidate field per column
# 4. output_file_name() - <basename>.<ext>, or <PI|PE><DDHHMM>.csv for packing lists
# 5. write_output() - Serialize and write to the output directory
#
# Serialize flow: records -> conditional masking -> per-field formatting -> txt lines / csv rows -> file
# Fixed-width line length in UTF-8 bytes is always the sum of the schema field lengths.

"""
Output serialization for converted trade documents.
"""

import csv
import io
import logging
import os
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from etl.parsers import ParsedDocument, Record, clean_text, is_blank, parse_number
from etl.transform import normalize_indicator
from registry.models import CsvColumn, FieldSpec, FieldType, OutputFormat, RegistryEntry

logger = logging.getLogger(__name__)

OUTPUT_ENCODING = "utf-8"

_DATE_FORMATS = {
    "YYYYMMDD": "%Y%m%d",
    "YYYY-MM-DD": "%Y-%m-%d",
}


def format_number(value, decimals: int) -> str:
    """
    Fixed-point rendering with trailing fractional zeros removed.

    ``12.5`` with 8 decimals -> ``"12.5"``, ``100`` -> ``"100"``, ``3.0`` -> ``"3"``.
    """
    number = parse_number(value)
    if number is None:
        return ""
    text = f"{Decimal(str(number)):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_date(value, picture: Optional[str]) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return ""
    return value.strftime(_DATE_FORMATS.get((picture or "").upper(), "%Y%m%d"))


def format_value(value, spec: FieldSpec) -> str:
    """Render ``value`` for ``spec`` without padding."""
    if is_blank(value):
        return ""
    if spec.type == FieldType.NUMERIC:
        return format_number(value, spec.decimals)
    if spec.type == FieldType.DATE:
        return format_date(value, spec.format)
    if isinstance(value, float):
        return clean_text(value)
    return str(value)


def fit(text: str, length: int) -> str:
    """Pad or cut ``text`` to ``length`` UTF-8 bytes, never splitting a character."""
    encoded = text.encode(OUTPUT_ENCODING)
    if len(encoded) > length:
        text = encoded[:length].decode(OUTPUT_ENCODING, errors="ignore")
        encoded = text.encode(OUTPUT_ENCODING)
    return text + " " * (length - len(encoded))


def masked_record(record: Record, entry: RegistryEntry) -> Record:
    """
    Copy of ``record`` with the conditional group applied for output.

    An indicator that is neither of its two codes prints blank, and the
    dependents print blank unless the indicator is active.
    """
    group = entry.conditional_group
    if group is None:
        return record

    masked = dict(record)
    indicator = normalize_indicator(record.get(group.indicator))
    masked[group.indicator] = indicator
    if indicator != group.active_value:
        for name in group.dependents:
            masked[name] = ""
    return masked


def to_fixed_width(records: Sequence[Record], entry: RegistryEntry) -> str:
    lines = []
    for record in records:
        record = masked_record(record, entry)
        lines.append(
            "".join(fit(format_value(record.get(spec.data_element), spec), spec.length) for spec in entry.schema_spec)
        )
    return "\n".join(lines)


def to_csv(records: Sequence[Record], entry: RegistryEntry) -> str:
    """
    Delimited rendering with RFC 4180 quoting.

    Columns come from ``entry.csv_columns`` (or one column per field when the
    entry declares none); each column takes the first of its candidate fields
    that has a value.
    """
    columns = entry.csv_columns or tuple(
        CsvColumn(header=spec.data_element, fields=(spec.data_element,)) for spec in entry.schema_spec
    )
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow([column.header for column in columns])
    for record in records:
        record = masked_record(record, entry)
        row = []
        for column in columns:
            cell = ""
            for name in column.fields:
                value = record.get(name)
                if not is_blank(value):
                    cell = format_value(value, entry.field(name))
                    break
            row.append(cell)
        writer.writerow(row)
    return buffer.getvalue()


def serialize(document: ParsedDocument, entry: RegistryEntry, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.CSV:
        return to_csv(document.records, entry)
    return to_fixed_width(document.records, entry)


def direction_prefix(records: Sequence[Record], entry: RegistryEntry) -> Optional[str]:
    """File prefix for the shipment direction of the first record that states one."""
    if not entry.direction_field:
        return None
    prefixes = {key.lower(): prefix for key, prefix in entry.direction_prefixes.items()}
    for record in records:
        direction = clean_text(record.get(entry.direction_field)).lower()
        if direction:
            return prefixes.get(direction, entry.default_direction_prefix)
    return entry.default_direction_prefix


def output_file_name(
    original_name: str,
    entry: RegistryEntry,
    output_format: OutputFormat,
    records: Sequence[Record] = (),
    now: Optional[datetime] = None,
) -> str:
    """
    Name of the converted file.

    Args:
        original_name: Uploaded file name
        entry: Registry entry of the document type
        output_format: Output format
        records: Transformed records (the packing list direction is read from them)
        now: Timestamp for timestamped names; defaults to the current time

    Returns:
        ``<PI|PE><DDHHMM>.<ext>`` for entries with a direction field, else ``<basename>.<ext>``
    """
    prefix = direction_prefix(records, entry)
    if prefix:
        now = now or datetime.now()
        return f"{prefix}{now:%d%H%M}.{output_format.value}"
    base = os.path.splitext(os.path.basename(original_name))[0]
    return f"{base}.{output_format.value}"


def write_output(
    document: ParsedDocument,
    entry: RegistryEntry,
    output_format: OutputFormat,
    original_name: str,
    output_dir: str,
    now: Optional[datetime] = None,
) -> str:
    """
    Serialize ``document`` and write it to ``output_dir``.

    Returns:
        Path of the written file
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, output_file_name(original_name, entry, output_format, document.records, now))
    content = serialize(document, entry, output_format)
    with open(path, "w", encoding=OUTPUT_ENCODING, newline="") as f:
        f.write(content)
    logger.info(f"Wrote {len(document.records)} {entry.doc_type.value} records to {path}")
    return path

