# WORKFLOW: Tests for the document schema registry.
# Used by: CI/CD pipelines, development testing
# Test scenarios:
# 1. Fixed-width offsets partition each line (no gaps, no overlaps)
# 2. Lookup by doc type key and by file prefix
# 3. Uniqueness map and output format rules
# 4. Schema construction errors

import pytest

from core.exceptions import IncompatibleOutputFormat, UnknownDocumentType
from registry.document_registry import DocumentRegistry, get_registry
from registry.finished_product import FINISHED_PRODUCT
from registry.models import DocumentType, OutputFormat, build_schema


class TestSchemaLayout:
    @pytest.mark.parametrize(
        "doc_type, line_length",
        [
            ("finished_product", 199),
            ("raw_material", 251),
            ("bill_of_materials", 101),
        ],
    )
    def test_line_length(self, registry, doc_type, line_length):
        assert registry.get_entry(doc_type).line_length == line_length

    def test_offsets_are_contiguous(self, registry):
        for entry in registry.entries():
            cursor = 0
            for spec in entry.schema_spec:
                assert spec.start == cursor, f"{entry.doc_type.value}: {spec.data_element}"
                assert spec.end == spec.start + spec.length - 1
                cursor = spec.end + 1
            assert cursor == entry.line_length

    def test_data_elements_unique_per_schema(self, registry):
        for entry in registry.entries():
            assert len(entry.field_names) == len(set(entry.field_names))

    def test_signature_and_metadata_fields_exist(self, registry):
        for entry in registry.entries():
            for name in entry.signature_fields + entry.metadata_fields:
                assert entry.field(name) is not None, f"{entry.doc_type.value}: {name}"

    def test_conditional_group_fields_exist(self):
        group = FINISHED_PRODUCT.conditional_group
        assert FINISHED_PRODUCT.field(group.indicator) is not None
        for name in group.dependents:
            assert FINISHED_PRODUCT.field(name) is not None

    def test_gap_is_rejected(self):
        with pytest.raises(ValueError):
            build_schema(
                [
                    {"item": 1, "data_element": "A", "length": 5, "start": 0, "end": 4},
                    {"item": 2, "data_element": "B", "length": 5, "start": 6, "end": 10},
                ]
            )

    def test_wrong_end_is_rejected(self):
        with pytest.raises(ValueError):
            build_schema([{"item": 1, "data_element": "A", "length": 5, "start": 0, "end": 5}])

    def test_duplicate_name_is_rejected(self):
        with pytest.raises(ValueError):
            build_schema(
                [
                    {"item": 1, "data_element": "A", "length": 1},
                    {"item": 2, "data_element": "A", "length": 1},
                ]
            )

    def test_numeric_picture_decimals(self, registry):
        entry = registry.get_entry("raw_material")
        assert entry.field("Unit Weight Lb.").decimals == 8
        assert entry.field("Description").decimals == 0


class TestRegistryLookup:
    def test_lookup_by_key_and_prefix(self, registry):
        assert registry.get_entry("raw_material").doc_type == DocumentType.RAW_MATERIAL
        assert registry.get_entry("RM").doc_type == DocumentType.RAW_MATERIAL
        assert registry.get_entry("fg").doc_type == DocumentType.FINISHED_PRODUCT
        assert registry.get_entry("PI").doc_type == DocumentType.PACKING_LIST
        assert registry.get_entry("PE").doc_type == DocumentType.PACKING_LIST
        assert registry.get_entry(DocumentType.BILL_OF_MATERIALS).doc_type == DocumentType.BILL_OF_MATERIALS

    def test_unknown_type_raises(self, registry):
        with pytest.raises(UnknownDocumentType) as exc_info:
            registry.get_entry("invoice")
        assert exc_info.value.error_type == "UNKNOWN_DOCUMENT_TYPE"

    def test_get_by_prefix_returns_none_for_unknown(self, registry):
        assert registry.get_by_prefix("ZZ") is None

    def test_duplicate_entry_rejected(self):
        entry = get_registry().get_entry("RM")
        with pytest.raises(ValueError):
            DocumentRegistry([entry, entry])

    def test_uniqueness_map(self, registry):
        uniqueness = registry.get_uniqueness_map()
        assert set(uniqueness) == set(registry.doc_types())
        assert "Dutiable Value (USD)" in uniqueness["finished_product"]
        assert "Component Part Number" in uniqueness["bill_of_materials"]
        assert "Part Number" not in uniqueness["raw_material"]

    def test_get_registry_is_cached(self):
        assert get_registry() is get_registry()


class TestOutputFormats:
    def test_defaults(self, registry):
        assert registry.default_format("raw_material") == "txt"
        assert registry.default_format("packing_list") == "csv"
        assert registry.allowed_formats("packing_list") == ["csv"]

    def test_empty_request_uses_default(self, registry):
        assert registry.validate_output_format("packing_list", None) == OutputFormat.CSV
        assert registry.validate_output_format("finished_product", "") == OutputFormat.TXT

    def test_allowed_format_is_normalized(self, registry):
        assert registry.validate_output_format("RM", ".TXT") == OutputFormat.TXT

    def test_incompatible_format_raises(self, registry):
        with pytest.raises(IncompatibleOutputFormat):
            registry.validate_output_format("packing_list", "txt")
        with pytest.raises(IncompatibleOutputFormat):
            registry.validate_output_format("raw_material", "csv")
