# WORKFLOW: Immutable lookup service over the supported document types.
# Used by: Detector, parsers, transform, validators, serializer, ConversionService, API
# Functions:
# 1. DocumentRegistry.get_entry() - Resolve a doc type key or file prefix
# 2. DocumentRegistry.get_uniqueness_map() - Canonical fields unique to each type
# 3. DocumentRegistry.validate_output_format() - Enforce per-type output formats
# 4. get_registry() - Process-wide registry, built once
#
# Registry flow: Field tables -> DocumentRegistry (prefix table, uniqueness map) -> consumers

import logging
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from core.exceptions import IncompatibleOutputFormat, UnknownDocumentType
from registry.bill_of_materials import BILL_OF_MATERIALS
from registry.finished_product import FINISHED_PRODUCT
from registry.models import DocumentType, OutputFormat, RegistryEntry
from registry.packing_list import PACKING_LIST
from registry.raw_material import RAW_MATERIAL

logger = logging.getLogger(__name__)

DEFAULT_ENTRIES = (FINISHED_PRODUCT, RAW_MATERIAL, BILL_OF_MATERIALS, PACKING_LIST)


class DocumentRegistry:
    """Read-only registry of document types, keyed by doc type and file prefix."""

    def __init__(self, entries: Iterable[RegistryEntry] = DEFAULT_ENTRIES):
        self._entries: Dict[str, RegistryEntry] = {}
        self._prefixes: Dict[str, RegistryEntry] = {}

        for entry in entries:
            key = entry.doc_type.value
            if key in self._entries:
                raise ValueError(f"Document type '{key}' registered twice")
            self._entries[key] = entry
            for prefix in entry.file_prefixes:
                prefix = prefix.upper()
                if prefix in self._prefixes:
                    raise ValueError(f"File prefix '{prefix}' registered twice")
                self._prefixes[prefix] = entry

        self._uniqueness = self._compute_uniqueness()
        logger.info(
            f"Document registry ready: {', '.join(self._entries)} "
            f"(prefixes: {', '.join(sorted(self._prefixes))})"
        )

    def _compute_uniqueness(self) -> Dict[str, FrozenSet[str]]:
        all_fields = {key: set(entry.field_names) for key, entry in self._entries.items()}
        uniqueness = {}
        for key, fields in all_fields.items():
            others = set()
            for other_key, other_fields in all_fields.items():
                if other_key != key:
                    others |= other_fields
            uniqueness[key] = frozenset(fields - others)
        return uniqueness

    def get_entry(self, identifier: Union[str, DocumentType]) -> RegistryEntry:
        """
        Resolve a document type key or a file prefix.

        Args:
            identifier: Doc type key (``raw_material``) or prefix (``RM``, case-insensitive)

        Returns:
            The registry entry

        Raises:
            UnknownDocumentType: If nothing matches
        """
        key = identifier.value if isinstance(identifier, DocumentType) else str(identifier)
        entry = self._entries.get(key) or self._prefixes.get(key.strip().upper())
        if entry is None:
            raise UnknownDocumentType(f"Unknown document type or prefix requested: {key}")
        return entry

    def get_by_prefix(self, prefix: str) -> Optional[RegistryEntry]:
        return self._prefixes.get(prefix.strip().upper())

    def get_uniqueness_map(self) -> Dict[str, FrozenSet[str]]:
        return dict(self._uniqueness)

    def doc_types(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> List[RegistryEntry]:
        return list(self._entries.values())

    def allowed_formats(self, identifier: Union[str, DocumentType]) -> List[str]:
        return [fmt.value for fmt in self.get_entry(identifier).allowed_formats]

    def default_format(self, identifier: Union[str, DocumentType]) -> str:
        return self.get_entry(identifier).default_format.value

    def validate_output_format(
        self, identifier: Union[str, DocumentType], output_format: Optional[str]
    ) -> OutputFormat:
        """
        Resolve the output format for a document type.

        Returns the type's default when ``output_format`` is empty.

        Raises:
            IncompatibleOutputFormat: If the type cannot be exported to the format
        """
        entry = self.get_entry(identifier)
        if not output_format:
            return entry.default_format

        requested = output_format.strip().lower().lstrip(".")
        allowed = [fmt.value for fmt in entry.allowed_formats]
        if requested not in allowed:
            raise IncompatibleOutputFormat(
                f"{entry.description} files can only be exported as "
                f"{', '.join(fmt.upper() for fmt in allowed)}"
            )
        return OutputFormat(requested)


@lru_cache()
def get_registry() -> DocumentRegistry:
    """Get the process-wide document registry."""
    return DocumentRegistry()
