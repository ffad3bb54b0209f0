# WORKFLOW: Packing list / scrap (PI, PE) layout.
# Used by: registry.document_registry
# Templates carry shipment metadata (customer, type of goods, type of shipment,
# arrival date, waybill, totals) in label cells above the line-item header row.
# Parsers merge those values into every line item, so each record is a full row.
# Output is delimited: one column per CSV_COLUMNS entry; the file prefix is PI
# for southbound shipments and PE for northbound or scrap.

from registry.models import (
    CsvColumn,
    DocumentType,
    FieldRole,
    OutputFormat,
    RegistryEntry,
    build_schema,
)

CUSTOMER_FIELD = "Customer(southbound) / Ship to (northbound)"
SHIPMENT_TYPE_FIELD = "Type of shipment"
ANCHOR_FIELD = "Part Number"


def _customizer(number: int) -> dict:
    return {
        "item": 29 + number,
        "data_element": f"Customizer {number}",
        "aliases": [f"Custom {number}", f"Custom Field {number}"],
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    }


PACKING_LIST_FIELDS = [
    {
        "item": 1,
        "data_element": CUSTOMER_FIELD,
        "aliases": ["Customer", "Ship to", "Ship To Address", "Consignee"],
        "type": "A",
        "length": 60,
        "format": "X(60)",
        "requirement": "M",
        "description": "Shipping address",
    },
    {
        "item": 2,
        "data_element": "Type of goods",
        "aliases": ["Type of good", "Goods Type"],
        "type": "A",
        "length": 2,
        "format": "X(02)",
        "possible_values": [
            "FG = Finish Goods",
            "RM = Raw Materials",
            "EQ = Machinery & Equipment",
        ],
        "requirement": "M",
    },
    {
        "item": 3,
        "data_element": SHIPMENT_TYPE_FIELD,
        "aliases": ["Type of shipments", "Shipment Type"],
        "type": "A",
        "length": 10,
        "format": "X(10)",
        "possible_values": ["Northbound", "Southbound", "Scrap"],
        "requirement": "M",
        "description": "Southbound - Importation to Mexico / Northbound - Exportation from Mexico",
    },
    {
        "item": 4,
        "data_element": "Expected date of arrival",
        "aliases": ["Arrival Date", "ETA"],
        "type": "D",
        "length": 10,
        "format": "YYYY-MM-DD",
        "requirement": "M",
    },
    {
        "item": 5,
        "data_element": "Waybill number",
        "aliases": ["Waybill", "Waybill No", "AWB"],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "O",
    },
    {
        "item": 6,
        "data_element": "Total gross weight",
        "aliases": ["Gross Weight", "Total Weight"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "O",
        "description": "Total gross weight per shipment",
    },
    {
        "item": 7,
        "data_element": "Total bundles",
        "aliases": ["Bundles", "Total Packages"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "O",
        "description": "Total bundles per shipment",
    },
    {
        "item": 8,
        "data_element": ANCHOR_FIELD,
        "aliases": ["Part No", "Part #", "SKU", "Item Number"],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "M",
        "description": "Item Part Number",
        "role": FieldRole.PART_NUMBER,
    },
    {
        "item": 9,
        "data_element": "Description",
        "aliases": ["Desc", "Item Description"],
        "type": "A",
        "length": 60,
        "format": "X(60)",
        "requirement": "M",
        "description": "Line item description",
    },
    {
        "item": 10,
        "data_element": "Quantity",
        "aliases": ["Qty", "Quantity Shipped"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Out of delivery",
    },
    {
        "item": 11,
        "data_element": "Unit Of Measure",
        "aliases": ["UOM", "Unit"],
        "type": "A",
        "length": 3,
        "format": "X(03)",
        "requirement": "M",
        "role": FieldRole.UOM,
    },
    {
        "item": 12,
        "data_element": "Unit Value (USD)",
        "aliases": ["Unit Value", "Unit Cost", "Unit Price"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Unit cost in USD",
    },
    {
        "item": 13,
        "data_element": "Added Value (USD)",
        "aliases": ["Added Value", "Value Added"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Added value in USD, 0 for raw material",
    },
    {
        "item": 14,
        "data_element": "Total Value (USD)",
        "aliases": ["Total Value", "Extended Value"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Unit value plus added value",
    },
    {
        "item": 15,
        "data_element": "Unit Net Weight",
        "aliases": ["Net Weight", "Unit Weight"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Weight in pounds",
    },
    {
        "item": 16,
        "data_element": "Country of Origin",
        "aliases": ["COO", "Origin", "Country"],
        "type": "A",
        "length": 2,
        "format": "X(02)",
        "requirement": "M",
        "description": "Line item origin",
        "role": FieldRole.COUNTRY,
    },
    {
        "item": 17,
        "data_element": "ECCN",
        "aliases": ["ECCN Number"],
        "type": "A",
        "length": 10,
        "format": "X(10)",
        "requirement": "M",
        "description": "Export Control Classification Number",
    },
    {
        "item": 18,
        "data_element": "License No.",
        "aliases": ["License Number", "License No", "LCN"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
        "description": "When applies (belongs to ECCN)",
    },
    {
        "item": 19,
        "data_element": "License Exception",
        "aliases": ["Lic Exception"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
        "description": "When applies (belongs to ECCN)",
    },
    {
        "item": 20,
        "data_element": "US IMP HTS Code",
        "aliases": ["Importation HTS Code", "Import HTS", "HTS Import"],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS code for importation",
        "role": FieldRole.HTS_CODE,
    },
    {
        "item": 21,
        "data_element": "US EXP HTS Code",
        "aliases": ["Exportation HTS Code", "Export HTS", "HTS Export", "Schedule B"],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS code for exportation",
        "role": FieldRole.HTS_CODE,
    },
    {
        "item": 22,
        "data_element": "Regime",
        "aliases": ["Customs Regime"],
        "type": "A",
        "length": 10,
        "format": "X(10)",
        "possible_values": ["Permanent", "Temporary"],
        "requirement": "A",
    },
    {
        "item": 23,
        "data_element": "Brand",
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    },
    {
        "item": 24,
        "data_element": "Model",
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    },
    {
        "item": 25,
        "data_element": "Serial",
        "aliases": ["Serial Number", "Serial No"],
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    },
    {
        "item": 26,
        "data_element": "Power Source Type",
        "aliases": ["Power Source"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "possible_values": [
            "Hydraulic",
            "Electric",
            "Pneumatic",
            "Water",
            "Gas",
            "Steam",
            "Manual",
            "Not applicable",
        ],
        "requirement": "A",
    },
    {
        "item": 27,
        "data_element": "Capacity",
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    },
    {
        "item": 28,
        "data_element": "Main Function",
        "aliases": ["Function"],
        "type": "A",
        "length": 40,
        "format": "X(40)",
        "requirement": "A",
    },
    {
        "item": 29,
        "data_element": "PO Number",
        "aliases": ["PO", "Purchase Order"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
    },
    *[_customizer(number) for number in range(1, 11)],
]

PACKING_LIST_SCHEMA = build_schema(PACKING_LIST_FIELDS)

# Delimited output contract. The customer column is written under its short
# header; every other column carries its canonical name.
CSV_COLUMNS = tuple(
    CsvColumn(
        header="Customer / Ship to" if spec.data_element == CUSTOMER_FIELD else spec.data_element,
        fields=(spec.data_element,),
    )
    for spec in PACKING_LIST_SCHEMA
)

PACKING_LIST = RegistryEntry(
    doc_type=DocumentType.PACKING_LIST,
    description="Packing List (PI/PE)",
    schema_spec=PACKING_LIST_SCHEMA,
    file_prefixes=("PI", "PE"),
    allowed_formats=(OutputFormat.CSV,),
    default_format=OutputFormat.CSV,
    signature_fields=(
        CUSTOMER_FIELD,
        "Type of goods",
        SHIPMENT_TYPE_FIELD,
        "Expected date of arrival",
        "Waybill number",
        "Total gross weight",
        "Total bundles",
        "Unit Of Measure",
        "Unit Value (USD)",
        "Total Value (USD)",
        "Unit Net Weight",
        "Brand",
        "Model",
        "Serial",
        "Power Source Type",
        "Capacity",
        "Main Function",
        "PO Number",
    ),
    metadata_fields=(
        CUSTOMER_FIELD,
        "Type of goods",
        SHIPMENT_TYPE_FIELD,
        "Expected date of arrival",
        "Waybill number",
        "Total gross weight",
        "Total bundles",
    ),
    anchor_field=ANCHOR_FIELD,
    csv_columns=CSV_COLUMNS,
    direction_field=SHIPMENT_TYPE_FIELD,
    direction_prefixes={"Southbound": "PI", "Northbound": "PE", "Scrap": "PE"},
    default_direction_prefix="PE",
)
