# WORKFLOW: Finished goods (FG) catalog layout.
# Used by: registry.document_registry
# Fixed-width record of 199 positions. Offsets are assigned sequentially.
# The NAFTA indicator gates the certificate-of-origin fields (preference
# criterion, producer, net cost, blanket period); see NAFTA_DEPENDENTS.

from registry.models import (
    ConditionalGroup,
    DocumentType,
    FieldRole,
    OutputFormat,
    RegistryEntry,
    build_schema,
)

NAFTA_FIELD = "NAFTA"
NAFTA_DEPENDENTS = (
    "Preference Criterion",
    "Producer",
    "Net Cost",
    "Period (From)",
    "Period (To)",
)

FINISHED_PRODUCT_FIELDS = [
    {
        "item": 1,
        "data_element": "Part Number",
        "aliases": ["Part No", "Part #", "SKU", "Item Number", "Finished Good Part Number"],
        "type": "A",
        "length": 30,
        "format": "X(30)",
        "requirement": "M",
        "description": "A Client defined code for the finished good",
        "role": FieldRole.PART_NUMBER,
    },
    {
        "item": 2,
        "data_element": "Description",
        "aliases": ["Desc", "Item Description", "Product Description"],
        "type": "A",
        "length": 60,
        "format": "X(60)",
        "requirement": "M",
        "description": "Line item description",
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
    },
    {
        "item": 4,
        "data_element": "Dutiable Value (USD)",
        "aliases": ["Dutiable Value", "Value (USD)", "Customs Value", "Unit Value"],
        "type": "N",
        "length": 17,
        "format": "9(08).9(08)",
        "requirement": "M",
        "description": "Unit value declared to customs",
    },
    {
        "item": 5,
        "data_element": "Unit of Measure",
        "aliases": ["UOM", "Unit"],
        "type": "A",
        "length": 3,
        "format": "X(03)",
        "requirement": "M",
        "description": "Unit of measure",
        "role": FieldRole.UOM,
    },
    {
        "item": 6,
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
        "item": 7,
        "data_element": "USA Importation HTS Code",
        "aliases": ["USA Import HTS", "USA HTS Import", "Import HTS Code"],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS Code for merchandise to be imported into the US",
        "role": FieldRole.HTS_CODE,
    },
    {
        "item": 8,
        "data_element": "USA Exportation Code",
        "aliases": ["USA Exportation HTS Code", "USA Export HTS", "Export HTS Code"],
        "type": "A",
        "length": 12,
        "format": "X(12)",
        "requirement": "M",
        "description": "US HTS / Schedule B code for merchandise exported from the US",
        "role": FieldRole.HTS_CODE,
    },
    {
        "item": 9,
        "data_element": "ECCN",
        "aliases": ["ECCN Number"],
        "type": "A",
        "length": 10,
        "format": "X(10)",
        "requirement": "A",
        "description": "Export Control Classification Number",
    },
    {
        "item": 10,
        "data_element": "FDA Marker",
        "aliases": ["FDA Flag", "FDA Indicator"],
        "type": "A",
        "length": 3,
        "format": "X(03)",
        "possible_values": [
            "FD0 = Not FDA regulated",
            "FD1 = May be FDA regulated",
            "FD2 = FDA regulated, data required",
            "FD3 = Prior notice required",
            "FD4 = Prior notice and data required",
        ],
        "requirement": "A",
        "description": "FDA flag of the HTS code",
    },
    {
        "item": 11,
        "data_element": "FDA Product Code",
        "aliases": ["FDA Code", "FDA Prod Code"],
        "type": "A",
        "length": 7,
        "format": "X(07)",
        "requirement": "A",
        "description": "FDA product code, required when the FDA Marker is FD2",
    },
    {
        "item": 12,
        "data_element": NAFTA_FIELD,
        "aliases": ["USMCA", "T-MEC", "NAFTA/USMCA"],
        "type": "A",
        "length": 1,
        "format": "X(01)",
        "possible_values": ["Y = Yes", "N = No"],
        "requirement": "A",
        "description": "Item qualifies for the preferential treatment",
        "role": FieldRole.INDICATOR,
    },
    {
        "item": 13,
        "data_element": "Preference Criterion",
        "aliases": ["Preference Criteria", "Pref Criterion"],
        "type": "A",
        "length": 1,
        "format": "X(01)",
        "possible_values": [
            "A = Wholly obtained or produced",
            "B = Meets the rule of origin",
            "C = Produced exclusively from originating materials",
            "D = Unassembled or disassembled goods",
            "E = Automatic data processing goods",
            "F = Qualifying agricultural good",
        ],
        "requirement": "A",
        "description": "Certificate of origin preference criterion",
    },
    {
        "item": 14,
        "data_element": "Producer",
        "aliases": ["Producer (Y/N)", "Is Producer"],
        "type": "A",
        "length": 6,
        "format": "X(06)",
        "possible_values": ["Yes", "No (1)", "No (2)", "No (3)"],
        "requirement": "A",
        "description": "Whether the exporter is the producer of the good",
        "role": FieldRole.PRODUCER,
    },
    {
        "item": 15,
        "data_element": "Net Cost",
        "aliases": ["Net Cost Method", "NC"],
        "type": "A",
        "length": 2,
        "format": "X(02)",
        "requirement": "A",
        "description": "CN when the net cost method was used, NO otherwise",
        "role": FieldRole.NET_COST,
    },
    {
        "item": 16,
        "data_element": "Period (From)",
        "aliases": ["Period From", "Blanket Period From"],
        "type": "D",
        "length": 8,
        "format": "YYYYMMDD",
        "requirement": "A",
        "description": "Blanket period start",
    },
    {
        "item": 17,
        "data_element": "Period (To)",
        "aliases": ["Period To", "Blanket Period To"],
        "type": "D",
        "length": 8,
        "format": "YYYYMMDD",
        "requirement": "A",
        "description": "Blanket period end",
    },
]

FINISHED_PRODUCT = RegistryEntry(
    doc_type=DocumentType.FINISHED_PRODUCT,
    description="Finished Goods (FG)",
    schema_spec=build_schema(FINISHED_PRODUCT_FIELDS),
    file_prefixes=("FG",),
    allowed_formats=(OutputFormat.TXT,),
    default_format=OutputFormat.TXT,
    signature_fields=(
        "Dutiable Value (USD)",
        "USA Importation HTS Code",
        "USA Exportation Code",
        "FDA Product Code",
        "FDA Marker",
        "Preference Criterion",
        "Net Cost",
        "Period (From)",
        "Period (To)",
    ),
    conditional_group=ConditionalGroup(
        indicator=NAFTA_FIELD,
        active_value="Y",
        dependents=NAFTA_DEPENDENTS,
    ),
)
