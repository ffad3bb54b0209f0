# WORKFLOW: Declarative schema model for the supported trade documents.
# Used by: Registry, header mapper, parsers, detector, transform, validators, serializer
# Models include:
# 1. FieldSpec - One column/fixed-width slot of a document schema
# 2. ConditionalGroup - Indicator field plus the fields it gates
# 3. CsvColumn - One column of a delimited output contract
# 4. RegistryEntry - Everything the pipeline knows about one document type
# 5. build_schema() - Assign and verify contiguous fixed-width offsets
#
# Schema flow: Field tables (registry/*.py) -> build_schema() -> RegistryEntry -> DocumentRegistry

import re
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    FINISHED_PRODUCT = "finished_product"
    RAW_MATERIAL = "raw_material"
    BILL_OF_MATERIALS = "bill_of_materials"
    PACKING_LIST = "packing_list"


class FieldType(str, Enum):
    ALPHANUMERIC = "A"
    NUMERIC = "N"
    DATE = "D"


class Requirement(str, Enum):
    MANDATORY = "M"
    CONDITIONAL = "A"
    OPTIONAL = "O"


class FieldRole(str, Enum):
    """Semantic tag that drives the data-driven transform/validation rules."""

    HTS_CODE = "hts_code"
    COUNTRY = "country"
    UOM = "uom"
    PART_NUMBER = "part_number"
    NET_COST = "net_cost"
    INDICATOR = "indicator"
    PRODUCER = "producer"
    FILLER = "filler"


class OutputFormat(str, Enum):
    TXT = "txt"
    CSV = "csv"


_ENUM_SPLIT_RE = re.compile(r"\s*=\s*")
_DECIMALS_RE = re.compile(r"9\(\d+\)\.9\((\d+)\)")


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    item: int
    data_element: str
    aliases: Tuple[str, ...] = ()
    type: FieldType = FieldType.ALPHANUMERIC
    length: int
    format: Optional[str] = None
    requirement: Requirement = Requirement.OPTIONAL
    possible_values: Optional[Tuple[str, ...]] = None
    description: Optional[str] = None
    role: Optional[FieldRole] = None
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def is_mandatory(self) -> bool:
        return self.requirement == Requirement.MANDATORY

    @property
    def is_filler(self) -> bool:
        return self.role == FieldRole.FILLER

    @property
    def search_terms(self) -> List[str]:
        return [self.data_element, *self.aliases]

    @property
    def enum_codes(self) -> Optional[List[str]]:
        """Codes of ``possible_values`` (left side of ``CODE = Description``)."""
        if self.possible_values is None:
            return None
        return [_ENUM_SPLIT_RE.split(value, maxsplit=1)[0] for value in self.possible_values]

    def enum_pairs(self) -> List[Tuple[str, Optional[str]]]:
        pairs = []
        for value in self.possible_values or ():
            parts = _ENUM_SPLIT_RE.split(value, maxsplit=1)
            pairs.append((parts[0], parts[1] if len(parts) > 1 else None))
        return pairs

    @property
    def decimals(self) -> int:
        """Decimal places declared by a numeric picture such as ``9(08).9(08)``."""
        if not self.format:
            return 0
        match = _DECIMALS_RE.search(self.format)
        return int(match.group(1)) if match else 0


class ConditionalGroup(BaseModel):
    """Fields that only carry meaning when ``indicator`` equals ``active_value``."""

    model_config = ConfigDict(frozen=True)

    indicator: str
    active_value: str = "Y"
    dependents: Tuple[str, ...]


class CsvColumn(BaseModel):
    model_config = ConfigDict(frozen=True)

    header: str
    fields: Tuple[str, ...]


class RegistryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_type: DocumentType
    description: str
    schema_spec: Tuple[FieldSpec, ...]
    file_prefixes: Tuple[str, ...]
    allowed_formats: Tuple[OutputFormat, ...] = (OutputFormat.TXT,)
    default_format: OutputFormat = OutputFormat.TXT
    signature_fields: Tuple[str, ...] = ()
    conditional_group: Optional[ConditionalGroup] = None
    metadata_fields: Tuple[str, ...] = ()
    anchor_field: Optional[str] = None
    csv_columns: Tuple[CsvColumn, ...] = ()
    direction_field: Optional[str] = None
    direction_prefixes: Dict[str, str] = Field(default_factory=dict)
    default_direction_prefix: Optional[str] = None

    @property
    def field_names(self) -> List[str]:
        return [spec.data_element for spec in self.schema_spec]

    @property
    def mandatory_fields(self) -> List[FieldSpec]:
        return [spec for spec in self.schema_spec if spec.is_mandatory]

    @property
    def line_length(self) -> int:
        return sum(spec.length for spec in self.schema_spec)

    def field(self, name: str) -> Optional[FieldSpec]:
        for spec in self.schema_spec:
            if spec.data_element == name:
                return spec
        return None

    def fields_with_role(self, role: FieldRole) -> List[FieldSpec]:
        return [spec for spec in self.schema_spec if spec.role == role]


def build_schema(fields: List[dict]) -> Tuple[FieldSpec, ...]:
    """
    Build FieldSpecs with contiguous fixed-width offsets.

    Fields that declare ``start`` keep it, the rest are placed right after the
    previous field. Every field must start where the previous one ended.

    Args:
        fields: Field definitions (FieldSpec keyword arguments)

    Returns:
        Tuple of FieldSpec in schema order

    Raises:
        ValueError: If offsets leave a gap, overlap, or names repeat
    """
    specs = []
    cursor = 0
    seen = set()
    for definition in fields:
        start = definition.get("start", cursor)
        if start != cursor:
            raise ValueError(
                f"Field '{definition['data_element']}' starts at {start}, expected {cursor}"
            )
        end = start + definition["length"] - 1
        if "end" in definition and definition["end"] != end:
            raise ValueError(
                f"Field '{definition['data_element']}' ends at {definition['end']}, expected {end}"
            )
        if definition["data_element"] in seen:
            raise ValueError(f"Duplicate data element '{definition['data_element']}'")
        seen.add(definition["data_element"])
        specs.append(FieldSpec(**{**definition, "start": start, "end": end}))
        cursor = end + 1
    return tuple(specs)
