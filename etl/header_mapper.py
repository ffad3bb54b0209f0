# WORKFLOW: Map the headers found in an input file to canonical schema field names.
# Used by: Parsers (spreadsheet, delimited text), detector
# Functions:
# 1. normalize_header() - Lower-case, punctuation to spaces, collapse whitespace
# 2. similarity() - Best of SequenceMatcher ratio and token-sorted ratio
# 3. map_headers() - Exact pass over names/aliases, then fuzzy pass over unclaimed fields
#
# Mapping flow: File headers -> exact (case-insensitive) -> fuzzy (>= threshold) -> {header: canonical}
# Each canonical field is produced at most once; unmatched headers are dropped.

"""
Header mapping between file columns and schema data elements.
"""

import difflib
import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

from core.config import settings
from registry.models import FieldSpec

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^0-9a-z]+")


def normalize_header(header) -> str:
    """
    Normalize a header for fuzzy comparison.

    Args:
        header: Raw header text

    Returns:
        Lower-cased header with punctuation replaced by single spaces
    """
    text = str(header or "").replace("\u00a0", " ").lower()
    return _NON_ALNUM_RE.sub(" ", text).strip()


def similarity(left: str, right: str) -> float:
    """
    Similarity of two normalized headers in [0, 1].

    Uses the larger of the plain SequenceMatcher ratio and the ratio over
    alphabetically sorted tokens, so "Weight Unit" still matches "Unit Weight".
    """
    if not left or not right:
        return 0.0
    plain = difflib.SequenceMatcher(None, left, right).ratio()
    sorted_left = " ".join(sorted(left.split()))
    sorted_right = " ".join(sorted(right.split()))
    token_sorted = difflib.SequenceMatcher(None, sorted_left, sorted_right).ratio()
    return max(plain, token_sorted)


def exact_key(header) -> str:
    return str(header).replace("\u00a0", " ").strip().lower()


def map_headers(
    file_headers: Iterable,
    schema_spec: Sequence[FieldSpec],
    threshold: Optional[float] = None,
) -> Dict[str, str]:
    """
    Map file headers to canonical data element names.

    The exact pass compares trimmed, lower-cased headers with every field's
    name and aliases in schema order. The fuzzy pass only considers fields no
    other header has claimed, and accepts the best candidate when its
    similarity reaches ``threshold``.

    Args:
        file_headers: Headers as read from the file (blank entries are skipped)
        schema_spec: Schema fields of the document type
        threshold: Minimum fuzzy similarity; defaults to settings.header_similarity_threshold

    Returns:
        Dict of original header -> canonical data element
    """
    if threshold is None:
        threshold = settings.header_similarity_threshold

    exact_index: Dict[str, str] = {}
    for spec in schema_spec:
        for term in spec.search_terms:
            exact_index.setdefault(term.strip().lower(), spec.data_element)

    header_map: Dict[str, str] = {}
    claimed = set()
    unmatched: List[str] = []

    for header in file_headers:
        if header is None or not str(header).strip():
            continue
        header = str(header)
        if header in header_map:
            continue
        canonical = exact_index.get(exact_key(header))
        if canonical and canonical not in claimed:
            header_map[header] = canonical
            claimed.add(canonical)
        else:
            unmatched.append(header)

    for header in unmatched:
        normalized = normalize_header(header)
        best_field = None
        best_score = 0.0
        for spec in schema_spec:
            if spec.data_element in claimed:
                continue
            score = max(similarity(normalized, normalize_header(term)) for term in spec.search_terms)
            if score > best_score:
                best_field, best_score = spec.data_element, score

        if best_field is not None and best_score >= threshold:
            header_map[header] = best_field
            claimed.add(best_field)
            logger.debug(f"Fuzzy match '{header}' -> '{best_field}' ({best_score:.2f})")
        else:
            logger.debug(f"No schema field matches header '{header}'")

    return header_map
