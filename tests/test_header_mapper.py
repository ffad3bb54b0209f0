"""Tests for header normalization and header -> canonical field mapping."""

from etl.header_mapper import map_headers, normalize_header, similarity
from registry.bill_of_materials import BILL_OF_MATERIALS
from registry.raw_material import RAW_MATERIAL

RM_SCHEMA = RAW_MATERIAL.schema_spec


def test_normalize_header():
    assert normalize_header("  Unit Weight\u00a0Lb. ") == "unit weight lb"
    assert normalize_header("Country-of-Origin") == "country of origin"
    assert normalize_header(None) == ""


def test_similarity_ignores_token_order():
    assert similarity("weight unit", "unit weight") == 1.0
    assert similarity("", "unit weight") == 0.0


def test_exact_match_on_name_and_alias_is_case_insensitive():
    mapping = map_headers(["PART NO", "description", "UOM", "COO"], RM_SCHEMA)
    assert mapping == {
        "PART NO": "Part Number",
        "description": "Description",
        "UOM": "Unit of measure",
        "COO": "Country of origin",
    }


def test_fuzzy_match_for_misspelled_header():
    mapping = map_headers(["Unit Wieght Lb"], RM_SCHEMA)
    assert mapping == {"Unit Wieght Lb": "Unit Weight Lb."}


def test_threshold_controls_fuzzy_pass():
    assert map_headers(["Unit Wieght Lb"], RM_SCHEMA, threshold=1.0) == {}


def test_unrelated_headers_are_dropped():
    mapping = map_headers(["Zzyzx", "", None, "Part Number"], RM_SCHEMA)
    assert mapping == {"Part Number": "Part Number"}


def test_each_canonical_field_mapped_once():
    mapping = map_headers(["Part Number", "Part No", "SKU"], RM_SCHEMA)
    assert mapping["Part Number"] == "Part Number"
    assert list(mapping.values()).count("Part Number") == 1
    assert len(set(mapping.values())) == len(mapping)


def test_exact_match_wins_over_earlier_fuzzy_candidate():
    # "Part Numbr" would fuzzy-match Part Number, but the exact header claims it first
    mapping = map_headers(["Part Numbr", "Part Number"], RM_SCHEMA)
    assert mapping["Part Number"] == "Part Number"
    assert mapping.get("Part Numbr") != "Part Number"


def test_mapping_is_deterministic():
    headers = ["FG Part Number", "Child Part Number", "Qty", "UOM", "Item Type", "Class"]
    first = map_headers(headers, BILL_OF_MATERIALS.schema_spec)
    for _ in range(5):
        assert map_headers(headers, BILL_OF_MATERIALS.schema_spec) == first
    assert first["FG Part Number"] == "Finished Good Part Number"
    assert first["Child Part Number"] == "Component Part Number"
    assert first["Qty"] == "Quantity"
    assert first["Item Type"] == "Type"
