# WORKFLOW: Infer the document type of an uploaded file from its content.
# Used by: ConversionService, API /detect, scripts.convert_file
# Functions:
# 1. DocumentDetector.detect() - Structural heuristic, then weighted schema scoring
# 2. DocumentDetector.score() - Per-type report (base, signature, hint, final)
# 3. DocumentDetector.detect_by_prefix() - Filename prefix lookup (fallback only)
# 4. filename_hint() - Doc type suggested by the file name
#
# Detection flow: bytes -> packing-list template check -> header row -> map_headers() per type
#                 -> final = 0.7 * base + 0.3 * signature + hint -> best type if base >= floor
# The detector abstains (None) rather than guess; callers decide what to do next.

"""
Document type detection.
"""

import csv
import io
import logging
import os
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from core.config import settings
from etl.header_mapper import exact_key, map_headers
from etl.parsers import (
    clean_text,
    decode_text,
    file_extension,
    find_header_row,
    rank_delimiters,
    read_sheet_rows,
)
from registry.document_registry import DocumentRegistry, get_registry
from registry.models import DocumentType

logger = logging.getLogger(__name__)

SPREADSHEET_EXTENSIONS = (".xlsx", ".xlsm", ".xls")
DETECTABLE_EXTENSIONS = SPREADSHEET_EXTENSIONS + (".csv",)

TEMPLATE_LABELS = ("type of shipment", "type of goods", "packing list")
TEMPLATE_LABEL_ROWS = 25
TEMPLATE_HEADER_ROWS = 80
TEMPLATE_MIN_CELLS = 6
HEADER_CANDIDATE_ROWS = 40
HEADER_GOOD_ENOUGH = 8

BASE_WEIGHT = 0.7
SIGNATURE_WEIGHT = 0.3

_FILENAME_HINTS = (
    (re.compile(r"^(pe|pi)\d*"), DocumentType.PACKING_LIST),
    (re.compile(r"\brm\b|_rm|rmexample"), DocumentType.RAW_MATERIAL),
    (re.compile(r"\bfg\b|_fg|fgexample|finished.?good"), DocumentType.FINISHED_PRODUCT),
    (re.compile(r"\bbm\b|_bm|bom|bomexample"), DocumentType.BILL_OF_MATERIALS),
    (re.compile(r"\beq\b|_eq|eqexample|packing.?list|spl|scrap"), DocumentType.PACKING_LIST),
)


@dataclass
class TypeScore:
    doc_type: str
    base: float
    signature: float
    hint_bonus: float
    final: float
    found_mandatory: int
    total_mandatory: int
    signature_found: int
    signature_size: int

    def as_dict(self) -> dict:
        return {
            "doc_type": self.doc_type,
            "base": round(self.base, 2),
            "signature": round(self.signature, 2),
            "hint_bonus": self.hint_bonus,
            "final": round(self.final, 2),
            "found_mandatory": self.found_mandatory,
            "total_mandatory": self.total_mandatory,
            "signature_found": self.signature_found,
            "signature_size": self.signature_size,
        }


def filename_hint(file_name: str) -> Optional[str]:
    """Doc type suggested by the file name, e.g. ``PI0612.xlsx`` -> packing_list."""
    base = os.path.basename(str(file_name or "")).lower()
    for pattern, doc_type in _FILENAME_HINTS:
        if pattern.search(base):
            return doc_type.value
    return None


def is_packing_list_template(rows: Sequence[Sequence]) -> bool:
    """
    Spot packing-list templates whose header row is not on row 1.

    Requires a metadata label (type of shipment / type of goods / packing
    list) in the first 25 rows and a row within the first 80 that holds both
    "part number" and "description" among at least 6 populated cells.
    """
    has_label = False
    for row in rows[:TEMPLATE_LABEL_ROWS]:
        cells = [clean_text(cell).lower() for cell in row]
        if any(label in cell for cell in cells for label in TEMPLATE_LABELS):
            has_label = True
            break
    if not has_label:
        return False

    for row in rows[:TEMPLATE_HEADER_ROWS]:
        cells = [clean_text(cell).lower() for cell in row]
        populated = sum(1 for cell in cells if cell)
        has_part = any("part number" in cell for cell in cells)
        has_description = any("description" in cell for cell in cells)
        if has_part and has_description and populated >= TEMPLATE_MIN_CELLS:
            return True
    return False


def spreadsheet_headers(rows: Sequence[Sequence]) -> List[str]:
    """Best header candidate among the first 40 rows."""
    index = find_header_row(
        rows, "part number", max_rows=HEADER_CANDIDATE_ROWS, stop_when=HEADER_GOOD_ENOUGH
    )
    return [clean_text(cell) for cell in rows[index]] if index is not None else []


def csv_headers(buffer: bytes) -> List[str]:
    """First row of a delimited file, split on the most frequent delimiter."""
    text = decode_text(buffer)
    lines = text.splitlines()
    first_line = lines[0] if lines else ""
    delimiter, count = rank_delimiters([first_line])[0]
    if count == 0:
        delimiter = ","
    for row in csv.reader(io.StringIO(text), delimiter=delimiter):
        return [clean_text(cell) for cell in row]
    return []


class DocumentDetector:
    """Scores every registered schema against the headers of a file."""

    def __init__(
        self,
        registry: Optional[DocumentRegistry] = None,
        base_threshold: Optional[float] = None,
        min_margin: Optional[float] = None,
        hint_bonus: Optional[float] = None,
    ):
        self.registry = registry or get_registry()
        self.base_threshold = settings.detection_base_threshold if base_threshold is None else base_threshold
        self.min_margin = settings.detection_min_margin if min_margin is None else min_margin
        self.hint_bonus = settings.filename_hint_bonus if hint_bonus is None else hint_bonus

        self._own_terms: Dict[str, FrozenSet[str]] = {}
        unique_terms: Dict[str, Set[str]] = {}
        uniqueness = self.registry.get_uniqueness_map()
        for entry in self.registry.entries():
            key = entry.doc_type.value
            self._own_terms[key] = frozenset(
                exact_key(term) for spec in entry.schema_spec for term in spec.search_terms
            )
            unique_terms[key] = {
                exact_key(term)
                for spec in entry.schema_spec
                if spec.data_element in uniqueness.get(key, ())
                for term in spec.search_terms
            }
        self._foreign_terms: Dict[str, FrozenSet[str]] = {
            key: frozenset().union(*(terms for other, terms in unique_terms.items() if other != key))
            for key in unique_terms
        }

    def scoring_headers(self, headers: Sequence[str], doc_type: str) -> List[str]:
        """
        Headers offered to the mapper when scoring ``doc_type``.

        A header that names a field unique to another type is left out unless
        it also names a field of ``doc_type``, so the fuzzy pass cannot turn
        e.g. "USA Importation HTS Code" into raw material coverage.
        """
        own = self._own_terms.get(doc_type, frozenset())
        foreign = self._foreign_terms.get(doc_type, frozenset())
        kept = []
        for header in headers:
            key = exact_key(header)
            if key in foreign and key not in own:
                continue
            kept.append(header)
        return kept

    def score(self, headers: Sequence[str], file_name: str = "") -> List[TypeScore]:
        """
        Score every document type against ``headers``.

        Args:
            headers: Header row of the file
            file_name: Original file name, used for the filename hint

        Returns:
            TypeScores ordered best first (final, signature, signature size, base)
        """
        hint = filename_hint(file_name)
        scores = []
        for entry in self.registry.entries():
            candidates = self.scoring_headers(headers, entry.doc_type.value)
            mapped = set(map_headers(candidates, entry.schema_spec).values())

            mandatory = entry.mandatory_fields
            found_mandatory = sum(1 for spec in mandatory if spec.data_element in mapped)
            base = found_mandatory / len(mandatory) * 100 if mandatory else 100.0

            signature = entry.signature_fields
            signature_found = sum(1 for name in signature if name in mapped)
            signature_coverage = signature_found / len(signature) * 100 if signature else 0.0

            bonus = self.hint_bonus if hint == entry.doc_type.value else 0.0
            scores.append(
                TypeScore(
                    doc_type=entry.doc_type.value,
                    base=base,
                    signature=signature_coverage,
                    hint_bonus=bonus,
                    final=BASE_WEIGHT * base + SIGNATURE_WEIGHT * signature_coverage + bonus,
                    found_mandatory=found_mandatory,
                    total_mandatory=len(mandatory),
                    signature_found=signature_found,
                    signature_size=len(signature),
                )
            )

        scores.sort(key=lambda s: (s.final, s.signature, s.signature_size, s.base), reverse=True)
        for item in scores:
            logger.debug(
                f"{item.doc_type}: base {item.base:.2f}% (M {item.found_mandatory}/{item.total_mandatory}), "
                f"signature {item.signature:.2f}% ({item.signature_found}/{item.signature_size}), "
                f"hint +{item.hint_bonus}, final {item.final:.2f}"
            )
        return scores

    def detect(self, buffer: bytes, file_name: str) -> Optional[str]:
        """
        Detect the document type of a file.

        Args:
            buffer: File content
            file_name: Original file name (extension selects the reader)

        Returns:
            Doc type key, or None when no type is a confident match
        """
        extension = file_extension(file_name)
        if extension not in DETECTABLE_EXTENSIONS:
            logger.info(f"Content detection not available for '{extension}' files")
            return None

        rows = None
        if extension in SPREADSHEET_EXTENSIONS:
            rows = read_sheet_rows(buffer)
            if is_packing_list_template(rows):
                logger.info(f"{file_name}: matched the packing list template layout")
                return DocumentType.PACKING_LIST.value

        if rows is not None:
            headers = spreadsheet_headers(rows)
        else:
            headers = csv_headers(buffer)
        if not headers:
            logger.info(f"{file_name}: no header row found")
            return None

        scores = self.score(headers, file_name)
        best = scores[0]
        if best.base < self.base_threshold:
            logger.info(
                f"{file_name}: best '{best.doc_type}' base {best.base:.2f} < {self.base_threshold}, abstaining"
            )
            return None

        if self.min_margin > 0 and len(scores) > 1:
            margin = best.final - scores[1].final
            if margin < self.min_margin:
                logger.info(
                    f"{file_name}: '{best.doc_type}' leads '{scores[1].doc_type}' by {margin:.2f} "
                    f"< {self.min_margin}, abstaining"
                )
                return None

        logger.info(f"{file_name}: detected {best.doc_type} (final {best.final:.2f})")
        return best.doc_type

    def detect_by_prefix(self, file_name: str) -> Optional[str]:
        """Doc type registered for the first two characters of the file name."""
        prefix = os.path.basename(str(file_name or ""))[:2].upper()
        if len(prefix) < 2:
            return None
        entry = self.registry.get_by_prefix(prefix)
        return entry.doc_type.value if entry else None


def detect(buffer: bytes, file_name: str) -> Optional[str]:
    return DocumentDetector().detect(buffer, file_name)


def detect_by_prefix(file_name: str) -> Optional[str]:
    return DocumentDetector().detect_by_prefix(file_name)
