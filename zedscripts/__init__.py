"""Schema-driven validation of Project Zomboid script and translation files."""

from zedscripts.diagnostics import Diagnostic
from zedscripts.options import ValidationMode, ValidationOptions
from zedscripts.pipeline import (
    DocumentKind,
    DocumentResultCache,
    ScriptValidationResult,
    TranslationValidationResult,
    classify_document,
    validate_document,
    validate_script_document,
    validate_translation_document,
)
from zedscripts.schema import SchemaRegistry, SchemaSnapshot, load_schema_files, load_schema_snapshot

__all__ = [
    "Diagnostic",
    "DocumentKind",
    "DocumentResultCache",
    "SchemaRegistry",
    "SchemaSnapshot",
    "ScriptValidationResult",
    "TranslationValidationResult",
    "ValidationMode",
    "ValidationOptions",
    "classify_document",
    "load_schema_files",
    "load_schema_snapshot",
    "validate_document",
    "validate_script_document",
    "validate_translation_document",
]
