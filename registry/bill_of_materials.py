# WORKFLOW: Bill of materials (BM) layout.
# Used by: registry.document_registry
# Fixed-width record of 101 positions linking a finished good to its components.

from registry.models import (
    DocumentType,
    FieldRole,
    OutputFormat,
    RegistryEntry,
    build_schema,
)

BILL_OF_MATERIALS_FIELDS = [
    {
        "item": 1,
        "data_element": "Finished Good Part Number",
        "aliases": [
            "FG Part Number",
            "Parent Part Number",
            "Parent SKU",
            "Assembly SKU",
            "Finished Good SKU",
        ],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "M",
        "description": "A Client defined code for the Finished Good or Sub-Assy part",
        "role": FieldRole.PART_NUMBER,
        "start": 0,
        "end": 29,
    },
    {
        "item": 2,
        "data_element": "Component Part Number",
        "aliases": [
            "Component SKU",
            "Child Part Number",
            "Raw Material Part Number",
            "RM Part Number",
        ],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "M",
        "description": "A Client defined code for the component that is part of the FG or Sub-Assy",
        "role": FieldRole.PART_NUMBER,
        "start": 30,
        "end": 59,
    },
    {
        "item": 3,
        "data_element": "Type",
        "aliases": ["Component Type", "Item Type"],
        "type": "A",
        "length": 1,
        "format": "X(01)",
        "possible_values": ["P = Part", "S = Sub-Assembly"],
        "requirement": "M",
        "description": "Identifies the component as a Part or as a Sub-Assembly (multi-level BOM)",
        "start": 60,
        "end": 60,
    },
    {
        "item": 4,
        "data_element": "Quantity",
        "aliases": ["Qty", "BOM Quantity", "Quantity Per"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Quantity of the component consumed by one Finished Good or Sub-Assy",
        "start": 61,
        "end": 77,
    },
    {
        "item": 5,
        "data_element": "Unit of Measure",
        "aliases": ["UOM", "Unit"],
        "type": "A",
        "length": 3,
        "format": "X(03)",
        "requirement": "M",
        "description": "Same unit of measure used in the Raw Material catalog",
        "role": FieldRole.UOM,
        "start": 78,
        "end": 80,
    },
    {
        "item": 6,
        "data_element": "Component classification",
        "aliases": ["Classification", "Component Class"],
        "type": "A",
        "length": 20,
        "format": "X(20)",
        "requirement": "O",
        "description": "A client defined code that identifies the component type",
        "start": 81,
        "end": 100,
    },
]

BILL_OF_MATERIALS = RegistryEntry(
    doc_type=DocumentType.BILL_OF_MATERIALS,
    description="Bill of Materials (BM)",
    schema_spec=build_schema(BILL_OF_MATERIALS_FIELDS),
    file_prefixes=("BM",),
    allowed_formats=(OutputFormat.TXT,),
    default_format=OutputFormat.TXT,
    signature_fields=(
        "Finished Good Part Number",
        "Component Part Number",
        "Component classification",
        "Type",
    ),
)
