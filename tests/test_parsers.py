# WORKFLOW: Tests for the spreadsheet, delimited and fixed-width parsers.
# Used by: CI/CD pipelines, development testing
# Test scenarios:
# 1. Spreadsheet header mapping, typed values, stop at first blank row
# 2. Packing list templates: header row search and metadata merge
# 3. Delimiter selection (semicolon beats commas inside values)
# 4. Fixed-width slicing by schema offsets
# 5. Parser selection by extension

from datetime import date

import pytest

from conftest import RM_HEADERS, RM_ROW, build_xlsx, packing_list_template
from core.exceptions import UnsupportedFormat
from etl.parsers import (
    DelimitedTextParser,
    FixedWidthParser,
    SpreadsheetParser,
    clean_text,
    coerce_value,
    find_header_row,
    get_parser,
    parse,
    parse_number,
)
from registry.document_registry import get_registry

RAW_MATERIAL = get_registry().get_entry("raw_material")
PACKING_LIST = get_registry().get_entry("packing_list")


class TestCellHelpers:
    def test_clean_text(self):
        assert clean_text(None) == ""
        assert clean_text(float("nan")) == ""
        assert clean_text(12.0) == "12"
        assert clean_text("\u00a0 EAR99 ") == "EAR99"

    def test_parse_number(self):
        assert parse_number("1,234.50") == 1234.5
        assert parse_number("$12") == 12.0
        assert parse_number(7) == 7.0
        assert parse_number("n/a") is None
        assert parse_number(True) is None

    def test_coerce_numeric_keeps_unparseable_text(self):
        spec = RAW_MATERIAL.field("Unit Cost (USD)")
        assert coerce_value("1.5", spec) == 1.5
        assert coerce_value("TBD", spec) == "TBD"
        assert coerce_value("  ", spec) is None


class TestSpreadsheetParser:
    def test_parse_raw_material(self):
        buffer = build_xlsx([RM_HEADERS, RM_ROW])
        document = SpreadsheetParser().parse(buffer, RAW_MATERIAL)

        assert len(document.records) == 1
        record = document.records[0]
        assert set(record) == set(RAW_MATERIAL.field_names)
        assert record["Part Number"] == "rm-100"
        assert record["Unit Cost (USD)"] == 1.5
        assert record["Importation HTS Code"] == "7318152065"
        assert record["Filler"] is None

    def test_unknown_columns_are_dropped(self):
        buffer = build_xlsx([["Part Number", "Internal Notes"], ["A-1", "keep out"]])
        document = SpreadsheetParser().parse(buffer, RAW_MATERIAL)
        assert document.records == [{"Part Number": "A-1"}]

    def test_stops_at_first_blank_row(self):
        rows = [RM_HEADERS, RM_ROW, [None] * len(RM_HEADERS), ["rm-999"] + RM_ROW[1:]]
        document = SpreadsheetParser().parse(build_xlsx(rows), RAW_MATERIAL)
        assert [r["Part Number"] for r in document.records] == ["rm-100"]

    def test_packing_list_template_header_and_metadata(self):
        document = SpreadsheetParser().parse(build_xlsx(packing_list_template()), PACKING_LIST)

        assert document.header_row == 7
        assert document.metadata["Type of shipment"] == "Southbound"
        assert document.metadata["Customer(southbound) / Ship to (northbound)"] == "ACME Industrial"
        assert len(document.records) == 2
        for record in document.records:
            assert record["Type of goods"] == "FG"
            assert record["Waybill number"] == "WB-778812"
        assert document.records[1]["Part Number"] == "pl-2"

    def test_find_header_row_prefers_anchor(self):
        rows = [
            ["Report", "2025", "Q1"],
            ["Part Number", "Description", "Quantity"],
            ["A", "B", 1],
        ]
        assert find_header_row(rows, "Part Number") == 1
        assert find_header_row([["only"], ["two", "cells"]], "Part Number") is None


class TestDelimitedTextParser:
    def test_semicolon_beats_commas_in_values(self):
        text = "\n".join(
            [
                ";".join(RM_HEADERS[:9]),
                "RM-1;Bolt, steel, zinc, 1/2 in;0.25;1.5;EA;MX;7318152065;7318150000;EAR99",
                "RM-2;Nut, hex, M8, grade 8;0.05;0.2;EA;CN;7318162000;7318160000;EAR99",
            ]
        )
        parser = DelimitedTextParser()
        assert parser.choose_delimiter(text, RAW_MATERIAL) == ";"

        document = parser.parse(text.encode("utf-8"), RAW_MATERIAL)
        assert len(document.records) == 2
        assert document.records[0]["Description"] == "Bolt, steel, zinc, 1/2 in"
        assert document.records[1]["Unit Weight Lb."] == 0.05

    def test_comma_file_with_quotes(self):
        text = 'Part Number,Description,Unit of measure\nRM-1,"Bolt, steel",EA\n'
        document = DelimitedTextParser().parse(text.encode("utf-8"), RAW_MATERIAL)
        assert document.records == [
            {"Part Number": "RM-1", "Description": "Bolt, steel", "Unit of measure": "EA"}
        ]

    def test_rows_wider_than_header_are_kept(self):
        text = (
            "Part Number,Description,Unit of measure\n"
            "RM1,Bolt,EA\n"
            "RM2,Nut,EA,\n"
            "\n"
            "RM3,Washer,EA,extra,cells\n"
            "RM4,Pin\n"
        )
        document = DelimitedTextParser().parse(text.encode("utf-8"), RAW_MATERIAL)

        assert [record["Part Number"] for record in document.records] == ["RM1", "RM2", "RM3", "RM4"]
        assert document.records[1] == {"Part Number": "RM2", "Description": "Nut", "Unit of measure": "EA"}
        assert document.records[3]["Unit of measure"] is None

    def test_cp1252_fallback_and_bom(self):
        text = "Part Number,Description\nRM-1,Tornillo cabeza hexagonal ñ\n"
        document = DelimitedTextParser().parse(text.encode("cp1252"), RAW_MATERIAL)
        assert document.records[0]["Description"].endswith("ñ")

        bom = "\ufeffPart Number,Description\nRM-2,Washer\n".encode("utf-8")
        document = DelimitedTextParser().parse(bom, RAW_MATERIAL)
        assert document.records[0]["Part Number"] == "RM-2"


class TestFixedWidthParser:
    def test_slices_by_offsets(self):
        entry = get_registry().get_entry("bill_of_materials")
        line = (
            "FG-1".ljust(30)
            + "RM-100".ljust(30)
            + "P"
            + "2.5".ljust(17)
            + "EA "
            + "FASTENER".ljust(20)
        )
        assert len(line) == entry.line_length

        document = FixedWidthParser().parse(line.encode("utf-8"), entry)
        assert document.records == [
            {
                "Finished Good Part Number": "FG-1",
                "Component Part Number": "RM-100",
                "Type": "P",
                "Quantity": 2.5,
                "Unit of Measure": "EA",
                "Component classification": "FASTENER",
            }
        ]

    def test_dates_parsed_from_yyyymmdd(self):
        spec_line = " " * 223 + "20250801" + " " * 20
        record = FixedWidthParser.parse_line(spec_line, RAW_MATERIAL)
        assert record["License Expiration date"] == date(2025, 8, 1)
        assert record["Part Number"] is None


class TestParserSelection:
    @pytest.mark.parametrize(
        "file_name, parser_type",
        [
            ("RM_items.xlsx", SpreadsheetParser),
            ("legacy.XLS", SpreadsheetParser),
            ("macro.xlsm", SpreadsheetParser),
            ("items.csv", DelimitedTextParser),
            ("RM0101.txt", FixedWidthParser),
        ],
    )
    def test_get_parser(self, file_name, parser_type):
        assert isinstance(get_parser(file_name), parser_type)

    def test_unsupported_extension(self):
        with pytest.raises(UnsupportedFormat) as exc_info:
            parse(b"%PDF", "items.pdf", RAW_MATERIAL)
        assert exc_info.value.error_type == "UNSUPPORTED_FORMAT"
