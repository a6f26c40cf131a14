"""Script block and translation file schema snapshots."""

from zedscripts.schema.load import (
    SchemaFormatError,
    load_schema_directory,
    load_schema_files,
    load_schema_snapshot,
)
from zedscripts.schema.model import (
    DOCUMENT_BLOCK,
    BlockSchema,
    IdSpec,
    LanguageInfo,
    ParameterSchema,
    SchemaLookupError,
    SchemaSnapshot,
    TranslationSchema,
)
from zedscripts.schema.registry import SchemaRegistry

__all__ = [
    "DOCUMENT_BLOCK",
    "BlockSchema",
    "IdSpec",
    "LanguageInfo",
    "ParameterSchema",
    "SchemaFormatError",
    "SchemaLookupError",
    "SchemaRegistry",
    "SchemaSnapshot",
    "TranslationSchema",
    "load_schema_directory",
    "load_schema_files",
    "load_schema_snapshot",
]
