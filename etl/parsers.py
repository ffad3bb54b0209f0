# WORKFLOW: Read spreadsheet, delimited and fixed-width inputs into canonical records.
# Used by: ConversionService, detector (header helpers)
# Functions:
# 1. get_parser() - Pick the parser for a file extension
# 2. SpreadsheetParser.parse() - .xlsx/.xlsm/.xls via pandas (header row, metadata labels)
# 3. DelimitedTextParser.parse() - .csv with encoding fallback and delimiter sniffing
# 4. FixedWidthParser.parse() - .txt sliced by schema byte offsets
# 5. find_header_row() / read_metadata() - Template helpers for label-cell layouts
#
# Parse flow: bytes -> rows of cells -> header row -> map_headers() -> typed canonical records
# Non-canonical columns are dropped here; every later stage sees schema keys only.

"""
Input parsers for trade documents.
"""

import codecs
import csv
import io
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import openpyxl
import pandas as pd

from core.exceptions import UnsupportedFormat
from etl.header_mapper import map_headers
from registry.models import FieldSpec, FieldType, RegistryEntry

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

DELIMITER_CANDIDATES = (",", ";", "\t", "|")
SNIFF_LINES = 5
SAMPLE_ROWS = 20
HEADER_SCAN_ROWS = 80
ANCHOR_BONUS = 5
MIN_HEADER_CELLS = 3

_THOUSANDS_RE = re.compile(r"^-?\d{1,3}(,\d{3})+(\.\d+)?$")
_YYYYMMDD_RE = re.compile(r"^\d{8}$")


@dataclass
class ParsedDocument:
    """Records of one logical sheet plus what was read around them."""

    records: List[Record] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    header_row: Optional[int] = None

    def __len__(self) -> int:
        return len(self.records)


# ---------------------------------------------------------------------------
# Cell helpers
# ---------------------------------------------------------------------------

def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return value is pd.NaT


def clean_text(value) -> str:
    """Render a cell as trimmed text (NBSP -> space, integral floats without '.0')."""
    if is_blank(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).replace("\u00a0", " ").strip()


def parse_number(value) -> Optional[float]:
    if is_blank(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = clean_text(value).lstrip("$")
    if _THOUSANDS_RE.match(text):
        text = text.replace(",", "")
    try:
        return float(text)
    except ValueError:
        return None


def parse_yyyymmdd(text: str) -> Optional[date]:
    """Strict ``YYYYMMDD`` with a calendar check."""
    if not _YYYYMMDD_RE.match(text or ""):
        return None
    try:
        return date(int(text[:4]), int(text[4:6]), int(text[6:8]))
    except ValueError:
        return None


def coerce_value(value, spec: FieldSpec):
    """
    Type a raw spreadsheet/CSV cell according to its field.

    Numbers become floats (unparseable text is kept as text), dates become
    ``date`` when the cell already holds one and are otherwise left for the
    transform stage, everything else becomes trimmed text. Blank -> None.
    """
    if is_blank(value):
        return None

    if spec.type == FieldType.NUMERIC:
        number = parse_number(value)
        return number if number is not None else clean_text(value)

    if spec.type == FieldType.DATE:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, (int, float)):
            return value
        return clean_text(value)

    return clean_text(value) or None


def _column_map(headers: Sequence, header_map: Dict[str, str]) -> Dict[int, str]:
    """Column index -> canonical name; the first column wins for a repeated header."""
    columns: Dict[int, str] = {}
    used = set()
    for index, header in enumerate(headers):
        canonical = header_map.get(clean_text(header)) if not is_blank(header) else None
        if canonical and canonical not in used:
            columns[index] = canonical
            used.add(canonical)
    return columns


def _build_records(
    rows: Sequence[Sequence[Any]],
    columns: Dict[int, str],
    entry: RegistryEntry,
    stop_at_blank_row: bool,
) -> List[Record]:
    records = []
    for row in rows:
        if all(is_blank(cell) for cell in row):
            if stop_at_blank_row:
                break
            continue
        record: Record = {}
        for index, canonical in columns.items():
            cell = row[index] if index < len(row) else None
            record[canonical] = coerce_value(cell, entry.field(canonical))
        if any(value is not None for value in record.values()):
            records.append(record)
    return records


# ---------------------------------------------------------------------------
# Template helpers (header row not on row 1, metadata in label cells)
# ---------------------------------------------------------------------------

def find_header_row(
    rows: Sequence[Sequence[Any]],
    anchor: Optional[str],
    max_rows: int = HEADER_SCAN_ROWS,
    stop_when: Optional[int] = None,
) -> Optional[int]:
    """
    Locate the most header-like row.

    Score = populated cells + 5 when a cell contains ``anchor``
    (case-insensitive). Rows with fewer than 3 populated cells are skipped;
    the earliest row wins a tie.

    Args:
        rows: Sheet rows
        anchor: Header text expected in the header row, e.g. "Part Number"
        max_rows: How many leading rows to scan
        stop_when: Stop early once an anchored row has at least this many cells

    Returns:
        0-based row index, or None if no row qualifies
    """
    anchor_text = anchor.lower() if anchor else None
    best_index, best_score = None, -1
    for index, row in enumerate(rows[:max_rows]):
        cells = [clean_text(cell).lower() for cell in row]
        populated = sum(1 for cell in cells if cell)
        if populated < MIN_HEADER_CELLS:
            continue
        has_anchor = bool(anchor_text) and any(anchor_text in cell for cell in cells)
        score = populated + (ANCHOR_BONUS if has_anchor else 0)
        if score > best_score:
            best_index, best_score = index, score
            if stop_when is not None and has_anchor and populated >= stop_when:
                break
    return best_index


def read_metadata(rows: Sequence[Sequence[Any]], entry: RegistryEntry) -> Dict[str, Any]:
    """
    Read ``Label: value`` pairs from the rows above the header.

    A cell whose text (trailing ':' removed) equals a metadata field name or
    alias takes its value from the next populated cell to the right.
    """
    labels = {}
    for name in entry.metadata_fields:
        spec = entry.field(name)
        for term in spec.search_terms:
            labels.setdefault(term.strip().rstrip(":").strip().lower(), spec)

    metadata: Dict[str, Any] = {}
    for row in rows:
        for index, cell in enumerate(row):
            label = clean_text(cell).rstrip(":").strip().lower()
            spec = labels.get(label)
            if spec is None or spec.data_element in metadata:
                continue
            for value in row[index + 1:]:
                if not is_blank(value):
                    metadata[spec.data_element] = coerce_value(value, spec)
                    break
    return metadata


def merge_metadata(records: List[Record], metadata: Dict[str, Any]) -> None:
    """Fill blank record fields from the document metadata."""
    for record in records:
        for name, value in metadata.items():
            if is_blank(record.get(name)):
                record[name] = value


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

class DocumentParser:
    extensions: Tuple[str, ...] = ()

    def parse(self, buffer: bytes, entry: RegistryEntry) -> ParsedDocument:
        raise NotImplementedError


def read_sheet_rows(buffer: bytes) -> List[List[Any]]:
    """
    First worksheet as a list of rows, blank cells as None.

    Workbooks in the zip-based format (.xlsx/.xlsm) are read with openpyxl so
    blank rows survive; legacy .xls goes through pandas/xlrd.
    """
    if buffer[:2] == b"PK":
        workbook = openpyxl.load_workbook(io.BytesIO(buffer), read_only=True, data_only=True)
        try:
            if not workbook.worksheets:
                return []
            sheet = workbook.worksheets[0]
            return [list(row) for row in sheet.iter_rows(values_only=True)]
        finally:
            workbook.close()

    frame = pd.read_excel(io.BytesIO(buffer), sheet_name=0, header=None, dtype=object)
    frame = frame.astype(object).where(frame.notna(), None)
    return frame.values.tolist()


class SpreadsheetParser(DocumentParser):
    extensions = (".xlsx", ".xlsm", ".xls")

    def parse(self, buffer: bytes, entry: RegistryEntry) -> ParsedDocument:
        rows = read_sheet_rows(buffer)
        if not rows:
            return ParsedDocument()

        if entry.anchor_field:
            header_index = find_header_row(rows, entry.anchor_field)
        else:
            header_index = 0
        if header_index is None:
            logger.warning(f"No header row found for {entry.doc_type.value}")
            return ParsedDocument()

        headers = rows[header_index]
        header_map = map_headers([clean_text(h) for h in headers], entry.schema_spec)
        if not header_map:
            logger.warning(f"Header row {header_index + 1} matched no {entry.doc_type.value} fields")
            return ParsedDocument(header_row=header_index)

        columns = _column_map(headers, header_map)
        records = _build_records(rows[header_index + 1:], columns, entry, stop_at_blank_row=True)

        metadata = {}
        if entry.metadata_fields and header_index > 0:
            metadata = read_metadata(rows[:header_index], entry)
            merge_metadata(records, metadata)

        logger.info(
            f"Parsed {len(records)} {entry.doc_type.value} records from spreadsheet "
            f"(header row {header_index + 1}, {len(metadata)} metadata fields)"
        )
        return ParsedDocument(records=records, metadata=metadata, header_row=header_index)


def text_encoding(buffer: bytes) -> str:
    """``utf-8`` when the buffer decodes cleanly, else ``cp1252``."""
    try:
        buffer.decode("utf-8")
    except UnicodeDecodeError:
        return "cp1252"
    return "utf-8"


def strip_bom(buffer: bytes) -> bytes:
    return buffer[len(codecs.BOM_UTF8):] if buffer.startswith(codecs.BOM_UTF8) else buffer


def decode_text(buffer: bytes) -> str:
    """UTF-8 (BOM stripped) with a cp1252 fallback; NBSP -> space."""
    text = strip_bom(buffer).decode(text_encoding(buffer), errors="replace")
    return text.replace("\u00a0", " ")


def rank_delimiters(lines: Sequence[str]) -> List[Tuple[str, int]]:
    """Candidates with their counts over ``lines``, most frequent first."""
    counts = [(candidate, sum(line.count(candidate) for line in lines)) for candidate in DELIMITER_CANDIDATES]
    return sorted(counts, key=lambda item: -item[1])


class DelimitedTextParser(DocumentParser):
    extensions = (".csv",)

    def choose_delimiter(self, text: str, entry: RegistryEntry) -> str:
        """
        Pick the delimiter that yields the most complete sample rows.

        Each candidate present in the first lines test-parses a sample; the
        score is the number of sample rows with every mandatory field
        populated. Frequency rank breaks ties.

        Args:
            text: Decoded file content
            entry: Registry entry of the document type

        Returns:
            Delimiter character
        """
        lines = [line for line in text.splitlines() if line.strip()]
        ranked = [(candidate, count) for candidate, count in rank_delimiters(lines[:SNIFF_LINES]) if count > 0]
        if not ranked:
            return ","

        sample_text = "\n".join(lines[: SAMPLE_ROWS + 1])
        mandatory = [spec.data_element for spec in entry.mandatory_fields]
        best_delimiter, best_score = ranked[0][0], -1
        for candidate, _ in ranked:
            sample = list(csv.reader(io.StringIO(sample_text), delimiter=candidate))
            if not sample:
                continue
            header_map = map_headers([clean_text(h) for h in sample[0]], entry.schema_spec)
            columns = _column_map(sample[0], header_map)
            positions = {canonical: index for index, canonical in columns.items()}
            complete = 0
            if all(name in positions for name in mandatory):
                for row in sample[1:]:
                    if all(
                        positions[name] < len(row) and not is_blank(row[positions[name]])
                        for name in mandatory
                    ):
                        complete += 1
            logger.debug(f"Delimiter {candidate!r}: {complete} complete sample rows")
            if complete > best_score:
                best_delimiter, best_score = candidate, complete
        return best_delimiter

    def parse(self, buffer: bytes, entry: RegistryEntry) -> ParsedDocument:
        text = decode_text(buffer)
        if not text.strip():
            return ParsedDocument()

        delimiter = self.choose_delimiter(text, entry)
        # Ragged rows (e.g. a trailing delimiter) are kept; cells past the mapped columns are ignored
        rows = [
            row
            for row in csv.reader(io.StringIO(text), delimiter=delimiter)
            if not all(is_blank(cell) for cell in row)
        ]
        if not rows:
            return ParsedDocument()

        headers = rows[0]
        header_map = map_headers([clean_text(h) for h in headers], entry.schema_spec)
        columns = _column_map(headers, header_map)
        records = _build_records(rows[1:], columns, entry, stop_at_blank_row=False)
        logger.info(
            f"Parsed {len(records)} {entry.doc_type.value} records from delimited text "
            f"(delimiter {delimiter!r})"
        )
        return ParsedDocument(records=records, header_row=0)


class FixedWidthParser(DocumentParser):
    extensions = (".txt",)

    @staticmethod
    def parse_line(line: Union[str, bytes], entry: RegistryEntry, encoding: str = "utf-8") -> Record:
        """Slice one line by byte offsets; ``str`` lines are encoded first."""
        data = line.encode(encoding) if isinstance(line, str) else line
        record: Record = {}
        for spec in entry.schema_spec:
            raw = data[spec.start:spec.end + 1].decode(encoding, errors="replace").replace("\u00a0", " ")
            if spec.is_filler:
                record[spec.data_element] = raw if raw.strip() else None
                continue
            raw = raw.strip()
            if not raw:
                record[spec.data_element] = None
            elif spec.type == FieldType.NUMERIC:
                record[spec.data_element] = parse_number(raw)
            elif spec.type == FieldType.DATE:
                record[spec.data_element] = parse_yyyymmdd(raw)
            else:
                record[spec.data_element] = raw
        return record

    def parse(self, buffer: bytes, entry: RegistryEntry) -> ParsedDocument:
        encoding = text_encoding(buffer)
        records = [
            self.parse_line(line, entry, encoding)
            for line in strip_bom(buffer).splitlines()
            if line.strip()
        ]
        logger.info(f"Parsed {len(records)} {entry.doc_type.value} records from fixed-width text")
        return ParsedDocument(records=records)


_PARSERS = (SpreadsheetParser(), DelimitedTextParser(), FixedWidthParser())


def file_extension(file_name: str) -> str:
    name = str(file_name or "")
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def get_parser(file_name: str) -> DocumentParser:
    """
    Select the parser for a file by extension.

    Raises:
        UnsupportedFormat: If no parser handles the extension
    """
    extension = file_extension(file_name)
    for parser in _PARSERS:
        if extension in parser.extensions:
            return parser
    raise UnsupportedFormat(
        f"Unsupported input file format: {extension or '(none)'}", file_name=file_name
    )


def parse(buffer: bytes, file_name: str, entry: RegistryEntry) -> ParsedDocument:
    return get_parser(file_name).parse(buffer, entry)
