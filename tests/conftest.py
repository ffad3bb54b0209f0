# WORKFLOW: Shared pytest fixtures for the conversion pipeline tests.
# Used by: All test modules
# Fixtures include:
# 1. xlsx_bytes - Build an in-memory workbook from rows (openpyxl)
# 2. country_catalog / uom_catalog - Small catalogs for injection
# 3. transformer / validator - Pipeline stages wired to the small catalogs
# 4. rm_* / fg_* / bm_* / packing_list_rows - Header sets and sample rows per document type
# 5. service - ConversionService writing into tmp_path

import io
from datetime import date

import openpyxl
import pytest

from catalogs.country_catalog import CountryCatalog
from catalogs.uom_catalog import UOMCatalog
from etl.transform import DocumentTransformer
from etl.validators import DocumentValidator
from registry.document_registry import DocumentRegistry
from services.converter import ConversionService

RM_HEADERS = [
    "Part Number",
    "Description",
    "Unit Weight Lb.",
    "Unit Cost (USD)",
    "Unit of measure",
    "Country of origin",
    "Importation HTS Code",
    "Exportation HTS Code",
    "ECCN",
    "Filler",
    "License Number (LCN)",
    "License Exception",
    "License Expiration date",
    "USML (ITAR)",
]

RM_ROW = [
    "rm-100",
    "Steel hex bolt",
    0.25,
    1.5,
    "EA",
    "Mexico",
    "7318152065",
    "7318.15.0000",
    "EAR99",
    None,
    None,
    None,
    None,
    None,
]

FG_HEADERS = [
    "Part Number",
    "Description",
    "Unit Weight Lb.",
    "Dutiable Value (USD)",
    "Unit of Measure",
    "Country of Origin",
    "USA Importation HTS Code",
    "USA Exportation Code",
    "ECCN",
    "FDA Marker",
    "FDA Product Code",
    "NAFTA",
    "Preference Criterion",
    "Producer",
    "Net Cost",
    "Period (From)",
    "Period (To)",
]

FG_ROW = [
    "fg-2000",
    "Infusion pump assembly",
    12.5,
    850,
    "EA",
    "MX",
    "9019109999",
    "9019.10.2000",
    "EAR99",
    "FD0",
    None,
    "Yes",
    "B",
    "Yes",
    "NO",
    date(2025, 1, 1),
    date(2025, 12, 31),
]

BM_HEADERS = [
    "Finished Good Part Number",
    "Component Part Number",
    "Type",
    "Quantity",
    "Unit of Measure",
    "Component classification",
]

BM_ROW = ["fg-2000", "rm-100", "P", 4, "EA", "FASTENER"]

PACKING_LIST_HEADERS = [
    "Part Number",
    "Description",
    "Quantity",
    "Unit Of Measure",
    "Unit Value (USD)",
    "Added Value (USD)",
    "Total Value (USD)",
    "Unit Net Weight",
    "Country of Origin",
    "ECCN",
    "US IMP HTS Code",
    "US EXP HTS Code",
]


def build_xlsx(rows) -> bytes:
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(list(row))
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def packing_list_template(shipment_type: str = "Southbound") -> list:
    return [
        ["Packing List"],
        ["Customer:", "ACME Industrial"],
        ["Type of goods:", "FG"],
        ["Type of shipment:", shipment_type],
        ["Expected date of arrival:", "2025-06-12"],
        ["Waybill number:", "WB-778812"],
        [],
        PACKING_LIST_HEADERS,
        ["pl-1", "Infusion pump", 10, "EA", 850, 0, 850, 12.5, "MX", "EAR99", "9019109999", "9019102000"],
        ["pl-2", "Pump housing", 5, "Each", 40, 2, 42, 1.2, "Mexico", "EAR99", "9019.10.9999", "9019.10.2000"],
    ]


@pytest.fixture
def xlsx_bytes():
    """Factory turning a list of rows into .xlsx bytes."""
    return build_xlsx


@pytest.fixture
def country_catalog():
    return CountryCatalog(
        rows=[
            ("US", "ESTADOS UNIDOS", "United States"),
            ("MX", "MEXICO", "Mexico"),
            ("CN", "CHINA", "China"),
            ("ES", "ESPAÑA", "Spain"),
        ]
    )


@pytest.fixture
def uom_catalog():
    return UOMCatalog(rows=[("EA", "Each", 0), ("KG", "Kilogram", 3), ("PCS", "Pieces", 0)])


@pytest.fixture
def transformer(country_catalog, uom_catalog):
    return DocumentTransformer(country_catalog=country_catalog, uom_catalog=uom_catalog)


@pytest.fixture
def validator(country_catalog, uom_catalog):
    return DocumentValidator(
        country_catalog=country_catalog,
        uom_catalog=uom_catalog,
        allow_empty_mandatory_fields=False,
        validate_uom_codes=True,
    )


@pytest.fixture
def registry():
    return DocumentRegistry()


@pytest.fixture
def rm_workbook():
    return build_xlsx([RM_HEADERS, RM_ROW])


@pytest.fixture
def fg_workbook():
    return build_xlsx([FG_HEADERS, FG_ROW])


@pytest.fixture
def bm_workbook():
    return build_xlsx([BM_HEADERS, BM_ROW])


@pytest.fixture
def packing_list_workbook():
    return build_xlsx(packing_list_template())


@pytest.fixture
def service(registry, transformer, validator, tmp_path):
    return ConversionService(
        registry=registry,
        transformer=transformer,
        validator=validator,
        output_dir=str(tmp_path / "converted"),
        error_report_dir=str(tmp_path / "error_reports"),
        write_output_on_validation_error=False,
    )
