# WORKFLOW: Unit of measure catalog.
# Used by: etl.transform (normalize), etl.validators (code membership)
# Functions:
# 1. UOMCatalog.normalize() - Code, description, "EA - Each" or "EA," -> code
# 2. UOMCatalog.is_valid_code() / code_to_name() / name_to_code() / decimals()
# 3. get_uom_catalog() - Process-wide catalog, built once
#
# Catalog flow: Static table -> optional spreadsheet overlay (Code, Description, Decimals) -> lookups

import logging
import os
import re
from functools import lru_cache
from typing import Dict, Iterable, Optional, Tuple

import pandas as pd

from catalogs.country_catalog import normalize_name, pick_column
from core.config import settings

logger = logging.getLogger(__name__)

# (code, description, decimals)
STATIC_UOM = (
    ("EA", "Each", 0),
    ("PCS", "Pieces", 0),
    ("PR", "Pair", 0),
    ("DZ", "Dozen", 0),
    ("SET", "Set", 0),
    ("PK", "Pack", 0),
    ("BX", "Box", 0),
    ("RL", "Roll", 0),
    ("KG", "Kilogram", 3),
    ("G", "Gram", 3),
    ("LB", "Pound", 3),
    ("OZ", "Ounce", 3),
    ("MT", "Metric Ton", 3),
    ("L", "Liter", 3),
    ("ML", "Milliliter", 3),
    ("GAL", "Gallon", 3),
    ("M", "Meter", 3),
    ("CM", "Centimeter", 3),
    ("MM", "Millimeter", 3),
    ("FT", "Foot", 3),
    ("IN", "Inch", 3),
    ("M2", "Square Meter", 3),
    ("M3", "Cubic Meter", 3),
)

_TOKEN_SPLIT_RE = re.compile(r"[\s/-]+")
_NON_ALNUM_RE = re.compile(r"[^A-Z0-9]")


def _parse_decimals(raw) -> int:
    if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
        return 0
    text = str(raw).strip()
    if not text:
        return 0
    try:
        return int(float(text))
    except ValueError:
        return 3 if text.lower() == "yes" else 0


class UOMCatalog:
    """Unit of measure lookups over the static table plus an optional overlay."""

    def __init__(
        self,
        rows: Iterable[Tuple[str, str, int]] = STATIC_UOM,
        overlay_path: Optional[str] = None,
    ):
        self._units: Dict[str, Tuple[str, int]] = {}
        self._name_to_code: Dict[str, str] = {}

        for code, description, decimals in rows:
            self._units[code] = (description, decimals)
            self._name_to_code[normalize_name(description)] = code

        if overlay_path:
            self._load_overlay(overlay_path)
        logger.info(f"UOM catalog ready: {len(self._units)} units")

    def _load_overlay(self, path: str) -> None:
        if not os.path.exists(path):
            logger.warning(f"UOM catalog overlay not found at {path}; using static table")
            return

        try:
            frame = pd.read_excel(path, sheet_name=0, dtype=object)
        except Exception as e:
            logger.error(f"Could not read UOM catalog overlay {path}: {e}")
            return

        code_column = pick_column(frame.columns, ["CODE"])
        if code_column is None:
            logger.warning(f"UOM catalog overlay {path} has no Code column")
            return
        description_column = pick_column(frame.columns, ["DESCRIPTION"])
        decimals_column = pick_column(frame.columns, ["DECIMALS"])

        added = 0
        for _, row in frame.iterrows():
            code = row[code_column]
            code = "" if pd.isna(code) else str(code).strip().upper()
            if not code:
                continue
            description = row[description_column] if description_column is not None else None
            description = "" if description is None or pd.isna(description) else str(description).strip()
            decimals = _parse_decimals(row[decimals_column]) if decimals_column is not None else 0

            self._units[code] = (description or code, decimals)
            if description:
                self._name_to_code[normalize_name(description)] = code
            added += 1
        logger.info(f"Applied {added} UOM overlay entries from {path}")

    def is_valid_code(self, code) -> bool:
        return str(code or "").strip().upper() in self._units

    def code_to_name(self, code) -> Optional[str]:
        unit = self._units.get(str(code or "").strip().upper())
        return unit[0] if unit else None

    def name_to_code(self, name) -> Optional[str]:
        if not name:
            return None
        return self._name_to_code.get(normalize_name(name))

    def decimals(self, code) -> int:
        unit = self._units.get(str(code or "").strip().upper())
        return unit[1] if unit else 0

    def normalize(self, value):
        """
        Resolve a free-form unit to its catalog code.

        Tries, in order: the code itself, the full description, each token of
        strings like ``EA - Each`` or ``EA/EACH``, and the alphanumeric-only
        form (``EA,`` -> ``EA``). Unknown units come back upper-cased.

        Args:
            value: Raw unit of measure

        Returns:
            Catalog code, the upper-cased input, or the input itself when blank
        """
        if value is None:
            return None
        raw = str(value).strip()
        if not raw:
            return raw

        upper = raw.upper()
        if self.is_valid_code(upper):
            return upper

        by_name = self.name_to_code(raw)
        if by_name:
            return by_name

        for token in filter(None, _TOKEN_SPLIT_RE.split(upper)):
            if self.is_valid_code(token):
                return token
            by_token = self.name_to_code(token)
            if by_token:
                return by_token

        compact = _NON_ALNUM_RE.sub("", upper)
        if self.is_valid_code(compact):
            return compact

        return upper

    def __len__(self) -> int:
        return len(self._units)


@lru_cache()
def get_uom_catalog() -> UOMCatalog:
    """Get the process-wide unit of measure catalog."""
    overlay = None if settings.disable_catalog_overlay else settings.uom_catalog_path
    return UOMCatalog(overlay_path=overlay)
