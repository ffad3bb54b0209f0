# WORKFLOW: Tests for integrity checks and business rules.
# Used by: CI/CD pipelines, development testing
# Test scenarios:
# 1. Mandatory fields, enum codes, HTS format, catalog membership
# 2. Lenient mode for empty mandatory fields
# 3. FDA and NAFTA business rules (one error per missing piece)
# 4. Business rules skipped while integrity errors exist
# 5. Error report shape

from datetime import date

from etl.parsers import ParsedDocument
from etl.validators import (
    DocumentValidator,
    ErrorKind,
    ValidationError,
    generate_validation_report,
    row_number,
)
from registry.document_registry import get_registry

RAW_MATERIAL = get_registry().get_entry("raw_material")
FINISHED_PRODUCT = get_registry().get_entry("finished_product")


def raw_material_record(**overrides):
    record = {
        "Part Number": "RM-100",
        "Description": "Steel hex bolt",
        "Unit Weight Lb.": 0.25,
        "Unit Cost (USD)": 1.5,
        "Unit of measure": "EA",
        "Country of origin": "MX",
        "Importation HTS Code": "7318.15.2065",
        "Exportation HTS Code": "7318.15.0000",
        "ECCN": "EAR99",
    }
    record.update(overrides)
    return record


def finished_product_record(**overrides):
    record = {
        "Part Number": "FG-2000",
        "Description": "Infusion pump assembly",
        "Unit Weight Lb.": 12.5,
        "Dutiable Value (USD)": 850.0,
        "Unit of Measure": "EA",
        "Country of Origin": "MX",
        "USA Importation HTS Code": "9019.10.9999",
        "USA Exportation Code": "9019.10.2000",
        "FDA Marker": "FD0",
        "NAFTA": "Y",
        "Preference Criterion": "B",
        "Producer": "Yes",
        "Net Cost": "NO",
        "Period (From)": date(2025, 1, 1),
        "Period (To)": date(2025, 12, 31),
    }
    record.update(overrides)
    return record


def validate(validator, entry, *records):
    return validator.validate(ParsedDocument(records=list(records)), entry)


class TestIntegrity:
    def test_clean_record(self, validator):
        assert validate(validator, RAW_MATERIAL, raw_material_record()) == []

    def test_row_numbers_count_the_header(self):
        assert row_number(0) == 2

    def test_missing_mandatory_field(self, validator):
        errors = validate(validator, RAW_MATERIAL, raw_material_record(), raw_material_record(ECCN="  "))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.INTEGRITY
        assert errors[0].field == "ECCN"
        assert errors[0].row == 3
        assert "Mandatory field" in errors[0].message

    def test_lenient_mode_allows_empty_mandatory(self, country_catalog, uom_catalog):
        lenient = DocumentValidator(
            country_catalog=country_catalog,
            uom_catalog=uom_catalog,
            allow_empty_mandatory_fields=True,
        )
        assert validate(lenient, RAW_MATERIAL, raw_material_record(ECCN=None)) == []

    def test_unformatted_hts_code(self, validator):
        errors = validate(validator, RAW_MATERIAL, raw_material_record(**{"Importation HTS Code": "73181520"}))
        assert [e.field for e in errors] == ["Importation HTS Code"]
        assert errors[0].expected == "####.##.####"

    def test_country_and_uom_must_be_catalog_codes(self, validator):
        errors = validate(
            validator,
            RAW_MATERIAL,
            raw_material_record(**{"Country of origin": "Atlantis", "Unit of measure": "BUSHEL"}),
        )
        assert {e.field for e in errors} == {"Country of origin", "Unit of measure"}

    def test_uom_check_can_be_disabled(self, country_catalog, uom_catalog):
        relaxed = DocumentValidator(
            country_catalog=country_catalog,
            uom_catalog=uom_catalog,
            allow_empty_mandatory_fields=False,
            validate_uom_codes=False,
        )
        assert validate(relaxed, RAW_MATERIAL, raw_material_record(**{"Unit of measure": "BUSHEL"})) == []

    def test_enum_code_outside_possible_values(self, validator):
        errors = validate(validator, FINISHED_PRODUCT, finished_product_record(**{"FDA Marker": "FD9"}))
        assert len(errors) == 1
        assert errors[0].field == "FDA Marker"
        assert errors[0].expected == ["FD0", "FD1", "FD2", "FD3", "FD4"]

    def test_no_records(self, validator):
        errors = validate(validator, RAW_MATERIAL)
        assert len(errors) == 1
        assert errors[0].message == "No records found to validate."


class TestBusinessRules:
    def test_clean_finished_product(self, validator):
        assert validate(validator, FINISHED_PRODUCT, finished_product_record()) == []

    def test_nafta_yes_with_blank_period_from_gives_one_error(self, validator):
        errors = validate(validator, FINISHED_PRODUCT, finished_product_record(**{"Period (From)": None}))
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.BUSINESS_RULE
        assert errors[0].field == "Period (From)"
        assert errors[0].row == 2

    def test_nafta_yes_reports_each_missing_piece(self, validator):
        record = finished_product_record(
            **{"Preference Criterion": "", "Net Cost": "", "Period (From)": None, "Period (To)": None}
        )
        errors = validate(validator, FINISHED_PRODUCT, record)
        assert [e.field for e in errors] == ["Preference Criterion", "Net Cost", "Period (From)", "Period (To)"]
        assert errors[1].expected == ["CN", "NO"]

    def test_nafta_no_skips_certificate_rule(self, validator):
        record = finished_product_record(
            NAFTA="N", **{"Preference Criterion": "", "Net Cost": "", "Period (From)": "", "Period (To)": ""}
        )
        assert validate(validator, FINISHED_PRODUCT, record) == []

    def test_unlisted_unit_does_not_block_business_rules(self, country_catalog, uom_catalog):
        default = DocumentValidator(country_catalog=country_catalog, uom_catalog=uom_catalog)
        assert default.validate_uom_codes is False

        record = finished_product_record(**{"Unit of Measure": "LBR", "Period (From)": None})
        errors = validate(default, FINISHED_PRODUCT, record)
        assert [(e.kind, e.field) for e in errors] == [(ErrorKind.BUSINESS_RULE, "Period (From)")]

    def test_fda_product_code_required_for_fd2(self, validator):
        errors = validate(validator, FINISHED_PRODUCT, finished_product_record(**{"FDA Marker": "FD2"}))
        assert [e.field for e in errors] == ["FDA Product Code"]

        ok = finished_product_record(**{"FDA Marker": "FD2", "FDA Product Code": "80FRN"})
        assert validate(validator, FINISHED_PRODUCT, ok) == []

    def test_rules_skipped_when_integrity_fails(self, validator):
        record = finished_product_record(**{"Description": None, "Period (From)": None})
        errors = validate(validator, FINISHED_PRODUCT, record)
        assert [e.kind for e in errors] == [ErrorKind.INTEGRITY]

    def test_rules_only_for_registered_types(self, validator):
        assert validator.apply_business_rules(ParsedDocument(records=[raw_material_record()]), RAW_MATERIAL) == []


class TestReport:
    def test_report_entries(self):
        errors = [
            ValidationError(kind=ErrorKind.INTEGRITY, message="Row 2: bad", field="ECCN", row=2),
            ValidationError(kind=ErrorKind.BUSINESS_RULE, message="Row 3: worse", field="Net Cost", row=3, value="XX"),
        ]
        report = generate_validation_report(errors)
        assert report == [
            {"type": "Integrity Error", "message": "Row 2: bad", "field": "ECCN", "row": 2},
            {
                "type": "Business Rule Violation",
                "message": "Row 3: worse",
                "field": "Net Cost",
                "row": 3,
                "value": "XX",
            },
        ]
