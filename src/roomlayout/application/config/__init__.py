"""Layout document schema and file loading.

Public API:
    - LayoutDocument: Root persisted document model
    - RoomSchema, LayoutObjectSchema, RoomFeatureSchema, ObjectGroupSchema
    - LAYOUT_VERSION: Version string written into saved documents
    - parse_layout_document: Validate decoded JSON against the schema
    - read_layout_file: Read, decode and schema-check a layout file
    - load_layout: Load a layout file into an engine
    - load_layout_from_dict: Load an in-memory document into an engine
    - dump_layout: Write an engine's session to a file
    - LayoutParseError: Exception for malformed layout documents
"""

from roomlayout.application.config.loader import (
    LayoutParseError,
    dump_layout,
    load_layout,
    load_layout_from_dict,
    parse_layout_document,
    read_layout_file,
)
from roomlayout.application.config.schema import (
    LAYOUT_VERSION,
    SUPPORTED_VERSIONS,
    LayoutDocument,
    LayoutObjectSchema,
    ObjectGroupSchema,
    RoomFeatureSchema,
    RoomSchema,
)

__all__ = [
    "LAYOUT_VERSION",
    "LayoutDocument",
    "LayoutObjectSchema",
    "LayoutParseError",
    "ObjectGroupSchema",
    "RoomFeatureSchema",
    "RoomSchema",
    "SUPPORTED_VERSIONS",
    "dump_layout",
    "load_layout",
    "load_layout_from_dict",
    "parse_layout_document",
    "read_layout_file",
]
