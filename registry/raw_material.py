# WORKFLOW: Raw material (RM) catalog layout.
# Used by: registry.document_registry
# Fixed-width record of 251 positions; offsets are explicit and verified by build_schema().

from registry.models import (
    DocumentType,
    FieldRole,
    OutputFormat,
    RegistryEntry,
    build_schema,
)

RAW_MATERIAL_FIELDS = [
    {
        "item": 1,
        "data_element": "Part Number",
        "aliases": ["Part No", "Part #", "SKU", "Item Number", "Material Code"],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "M",
        "description": "A Client defined code for the raw material or component",
        "role": FieldRole.PART_NUMBER,
        "start": 0,
        "end": 29,
    },
    {
        "item": 2,
        "data_element": "Description",
        "aliases": ["Desc", "Item Description", "Material Description"],
        "type": "A",
        "length": 60,
        "format": "X(60)",
        "requirement": "M",
        "description": "Line item description",
        "start": 30,
        "end": 89,
    },
    {
        "item": 3,
        "data_element": "Unit Weight Lb.",
        "aliases": ["Weight", "Unit Weight", "Weight (LBS)", "LBS"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Line item weight in pounds (LBS)",
        "start": 90,
        "end": 106,
    },
    {
        "item": 4,
        "data_element": "Unit Cost (USD)",
        "aliases": [
            "Unit Value (USD)",
            "Unit value",
            "Cost",
            "Unit Cost",
            "Price",
            "Unit Price",
            "Cost (USD)",
        ],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Line item unit cost",
        "start": 107,
        "end": 123,
    },
    {
        "item": 5,
        "data_element": "Unit of measure",
        "aliases": ["UOM", "Unit"],
        "type": "A",
        "length": 3,
        "format": "X(03)",
        "requirement": "M",
        "description": "Unit of measure",
        "role": FieldRole.UOM,
        "start": 124,
        "end": 126,
    },
    {
        "item": 6,
        "data_element": "Country of origin",
        "aliases": ["COO", "Origin", "Country"],
        "type": "A",
        "length": 2,
        "format": "X(02)",
        "requirement": "M",
        "description": "Line item origin",
        "role": FieldRole.COUNTRY,
        "start": 127,
        "end": 128,
    },
    {
        "item": 7,
        "data_element": "Importation HTS Code",
        "aliases": ["US IMP HTS Code", "HTS Import", "Import HTS", "HTS Code (Import)"],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS Code for merchandise to be imported into the US (Customs purposes)",
        "role": FieldRole.HTS_CODE,
        "start": 129,
        "end": 140,
    },
    {
        "item": 8,
        "data_element": "Exportation HTS Code",
        "aliases": [
            "US EXP HTS Code",
            "HTS Export",
            "Export HTS",
            "HTS Code (Export)",
            "Schedule B",
        ],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS Code for merchandise to be exported from the US (Customs purposes)",
        "role": FieldRole.HTS_CODE,
        "start": 141,
        "end": 152,
    },
    {
        "item": 9,
        "data_element": "ECCN",
        "aliases": ["ECCN Number"],
        "type": "A",
        "length": 10,
        "format": "X(10)",
        "requirement": "M",
        "description": "Export Control Classification Number",
        "start": 153,
        "end": 162,
    },
    {
        "item": 10,
        "data_element": "Filler",
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "O",
        "description": "Additional item's information",
        "role": FieldRole.FILLER,
        "start": 163,
        "end": 182,
    },
    {
        "item": 11,
        "data_element": "License Number (LCN)",
        "aliases": ["License No", "LCN", "License #"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
        "description": "When applies (belongs to ECCN)",
        "start": 183,
        "end": 202,
    },
    {
        "item": 12,
        "data_element": "License Exception",
        "aliases": ["Lic Exception", "Exception"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
        "description": "When applies (belongs to ECCN)",
        "start": 203,
        "end": 222,
    },
    {
        "item": 13,
        "data_element": "License Expiration date",
        "aliases": ["Lic Exp Date", "Expiration Date", "Expires On"],
        "type": "D",
        "length": 8,
        "format": "YYYYMMDD",
        "requirement": "A",
        "description": "When applies (belongs to ECCN)",
        "start": 223,
        "end": 230,
    },
    {
        "item": 14,
        "data_element": "USML (ITAR)",
        "aliases": ["USML", "ITAR"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "A",
        "description": "US Military License (when the material is classified as a military good)",
        "start": 231,
        "end": 250,
    },
]

RAW_MATERIAL = RegistryEntry(
    doc_type=DocumentType.RAW_MATERIAL,
    description="Raw Materials (RM)",
    schema_spec=build_schema(RAW_MATERIAL_FIELDS),
    file_prefixes=("RM",),
    allowed_formats=(OutputFormat.TXT,),
    default_format=OutputFormat.TXT,
    signature_fields=(
        "Unit Cost (USD)",
        "Unit of measure",
        "Country of origin",
        "Importation HTS Code",
        "Exportation HTS Code",
        "License Number (LCN)",
    ),
)
