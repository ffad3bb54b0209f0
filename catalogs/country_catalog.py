# WORKFLOW: Country of origin catalog (ISO 3166-1 alpha-2).
# Used by: etl.transform (name -> code), etl.validators (code membership)
# Functions:
# 1. CountryCatalog.is_valid_code() - Code membership
# 2. CountryCatalog.code_to_name() - Display name for a code
# 3. CountryCatalog.name_to_code() - Spanish or English name -> code
# 4. get_country_catalog() - Process-wide catalog, built once
#
# Catalog flow: Static table -> optional spreadsheet overlay (insert/override) -> lookups
# Names are compared without diacritics and case, so "España", "ESPANA" and
# "Spain" all resolve to ES.

import logging
import os
import unicodedata
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from catalogs.country_table import COUNTRIES
from core.config import settings

logger = logging.getLogger(__name__)

CODE_COLUMNS = [
    "CVE_PAIS",
    "CLAVE",
    "CODE",
    "ISO2",
    "ISO_2",
    "ISO ALPHA-2",
    "ALPHA2",
    "PAIS_COD",
    "CODIGO",
]
NAME_COLUMNS = [
    "DESCRIP",
    "PAIS",
    "COUNTRY",
    "DESCRIPTION",
    "NAME",
    "NOMBRE",
    "DESCRIPCION",
]


def normalize_name(value) -> str:
    """Upper-case a name and strip diacritics (NFKD)."""
    text = unicodedata.normalize("NFKD", str(value or ""))
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return " ".join(text.upper().split())


def pick_column(columns: Iterable, candidates: List[str]) -> Optional[str]:
    """Return the first column whose upper-cased name is one of ``candidates``."""
    for column in columns:
        if str(column).strip().upper() in candidates:
            return column
    return None


class CountryCatalog:
    """Code/name lookups over the static country table plus an optional overlay."""

    def __init__(
        self,
        rows: Iterable[Tuple[str, ...]] = COUNTRIES,
        overlay_path: Optional[str] = None,
    ):
        self._code_to_name: Dict[str, str] = {}
        self._name_to_code: Dict[str, str] = {}

        for code, name, *other_names in rows:
            self._code_to_name[code] = name
            self._name_to_code.setdefault(normalize_name(name), code)
            for other in other_names:
                self._name_to_code.setdefault(normalize_name(other), code)

        static_count = len(self._code_to_name)
        if overlay_path:
            self._load_overlay(overlay_path)
        logger.info(
            f"Country catalog ready: {static_count} static codes, "
            f"{len(self._code_to_name)} total"
        )

    def _load_overlay(self, path: str) -> None:
        if not os.path.exists(path):
            logger.warning(f"Country catalog overlay not found at {path}; using static table")
            return

        try:
            frame = pd.read_excel(path, sheet_name=0, dtype=object)
        except Exception as e:
            logger.error(f"Could not read country catalog overlay {path}: {e}")
            return

        code_column = pick_column(frame.columns, CODE_COLUMNS)
        name_column = pick_column(frame.columns, NAME_COLUMNS)
        if code_column is None or name_column is None:
            logger.warning(f"Country catalog overlay {path} has no recognizable code/name columns")
            return

        applied = 0
        for code, name in zip(frame[code_column], frame[name_column]):
            code = "" if pd.isna(code) else str(code).strip().upper()
            if not code:
                continue
            name = "" if pd.isna(name) else str(name).strip()
            self._code_to_name[code] = name
            if name:
                self._name_to_code[normalize_name(name)] = code
            applied += 1
        logger.info(f"Applied {applied} country overlay entries from {path}")

    def is_valid_code(self, code) -> bool:
        return str(code or "").strip().upper() in self._code_to_name

    def code_to_name(self, code) -> Optional[str]:
        return self._code_to_name.get(str(code or "").strip().upper())

    def name_to_code(self, name) -> Optional[str]:
        if not name:
            return None
        return self._name_to_code.get(normalize_name(name))

    def __len__(self) -> int:
        return len(self._code_to_name)


@lru_cache()
def get_country_catalog() -> CountryCatalog:
    """Get the process-wide country catalog."""
    overlay = None if settings.disable_catalog_overlay else settings.country_catalog_path
    return CountryCatalog(overlay_path=overlay)
