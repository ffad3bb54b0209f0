"""Tests for the country and unit of measure catalogs."""

import pandas as pd

from catalogs.country_catalog import CountryCatalog, get_country_catalog, normalize_name
from catalogs.uom_catalog import UOMCatalog, get_uom_catalog


class TestCountryCatalog:
    def test_static_table_loaded(self):
        catalog = CountryCatalog()
        assert len(catalog) >= 240
        assert catalog.is_valid_code("mx")
        assert catalog.code_to_name("US") == "ESTADOS UNIDOS"

    def test_name_lookup_in_spanish_and_english(self):
        catalog = CountryCatalog()
        assert catalog.name_to_code("Mexico") == "MX"
        assert catalog.name_to_code("méxico") == "MX"
        assert catalog.name_to_code("Germany") == "DE"
        assert catalog.name_to_code("ALEMANIA") == "DE"
        assert catalog.name_to_code("Atlantis") is None
        assert catalog.name_to_code("") is None

    def test_normalize_name_strips_diacritics(self):
        assert normalize_name("  España ") == "ESPANA"
        assert normalize_name("Côte  d'Ivoire") == "COTE D'IVOIRE"

    def test_overlay_adds_and_overrides(self, tmp_path):
        path = tmp_path / "paises.xlsx"
        pd.DataFrame(
            {"CVE_PAIS": ["XK", "MX"], "DESCRIP": ["KOSOVO", "MEXICO (ESTADOS UNIDOS MEXICANOS)"]}
        ).to_excel(path, index=False)

        catalog = CountryCatalog(rows=[("MX", "MEXICO", "Mexico")], overlay_path=str(path))
        assert catalog.is_valid_code("XK")
        assert catalog.code_to_name("MX") == "MEXICO (ESTADOS UNIDOS MEXICANOS)"
        assert catalog.name_to_code("Kosovo") == "XK"

    def test_missing_overlay_keeps_static_table(self, tmp_path):
        catalog = CountryCatalog(rows=[("MX", "MEXICO", "Mexico")], overlay_path=str(tmp_path / "missing.xlsx"))
        assert len(catalog) == 1

    def test_process_wide_catalog_is_cached(self):
        assert get_country_catalog() is get_country_catalog()


class TestUOMCatalog:
    def test_lookups(self):
        catalog = UOMCatalog()
        assert catalog.is_valid_code("ea")
        assert catalog.code_to_name("KG") == "Kilogram"
        assert catalog.name_to_code("each") == "EA"
        assert catalog.decimals("KG") == 3
        assert catalog.decimals("EA") == 0
        assert catalog.decimals("??") == 0

    def test_normalize(self):
        catalog = UOMCatalog()
        assert catalog.normalize("ea") == "EA"
        assert catalog.normalize("Each") == "EA"
        assert catalog.normalize("EA - Each") == "EA"
        assert catalog.normalize("EA,") == "EA"
        assert catalog.normalize("kilogram") == "KG"
        assert catalog.normalize("bushel") == "BUSHEL"
        assert catalog.normalize(None) is None
        assert catalog.normalize("  ") == ""

    def test_overlay(self, tmp_path):
        path = tmp_path / "uom.xlsx"
        pd.DataFrame(
            {"Code": ["BBL", "EA"], "Description": ["Barrel", "Each unit"], "Decimals": ["yes", 0]}
        ).to_excel(path, index=False)

        catalog = UOMCatalog(rows=[("EA", "Each", 0)], overlay_path=str(path))
        assert catalog.is_valid_code("BBL")
        assert catalog.decimals("BBL") == 3
        assert catalog.code_to_name("EA") == "Each unit"
        assert catalog.normalize("barrel") == "BBL"

    def test_process_wide_catalog_is_cached(self):
        assert get_uom_catalog() is get_uom_catalog()
