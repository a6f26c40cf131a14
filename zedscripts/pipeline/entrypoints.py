"""Document entrypoints: one snapshot in, one ordered diagnostic list out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from zedscripts.options import ValidationMode, ValidationOptions
from zedscripts.pipeline.classify import DocumentKind, classify_document
from zedscripts.pipeline.results import (
    ScriptValidationResult,
    TranslationValidationResult,
    ValidationResult,
)
from zedscripts.schema import SchemaRegistry, SchemaSnapshot
from zedscripts.scripts import BlockRule, validate_script_text
from zedscripts.translation import parse_translation_path, validate_translation_text

logger = logging.getLogger(__name__)


def validate_script_document(
    text: str,
    schema: SchemaSnapshot | SchemaRegistry,
    options: ValidationOptions | None = None,
    *,
    mode: ValidationMode | None = None,
    rules: Sequence[BlockRule] | None = None,
) -> ScriptValidationResult:
    """Validate a full script document snapshot."""
    snapshot = _resolve_schema(schema)
    resolved_options = _resolve_options(options, mode)
    tree, diagnostics = validate_script_text(text, snapshot, resolved_options, rules=rules)
    return ScriptValidationResult(
        source_text=text,
        schema=snapshot,
        tree=tree,
        diagnostics=diagnostics,
    )


def validate_translation_document(
    text: str,
    path: str,
    schema: SchemaSnapshot | SchemaRegistry,
    options: ValidationOptions | None = None,
    *,
    mode: ValidationMode | None = None,
) -> TranslationValidationResult:
    """Validate a full translation document snapshot located at `path`."""
    snapshot = _resolve_schema(schema)
    resolved_options = _resolve_options(options, mode)
    translation_path = parse_translation_path(path, snapshot)
    if translation_path is None:
        raise ValueError(f"Not a translation file path: {path!r} (expected .../Translate/<code>/<prefix><code>.txt)")
    translation_file, diagnostics = validate_translation_text(
        text,
        translation_path,
        snapshot,
        comment_prefixes=resolved_options.translation_comment_prefixes,
    )
    return TranslationValidationResult(
        source_text=text,
        schema=snapshot,
        path=translation_path,
        file=translation_file,
        diagnostics=diagnostics,
    )


def validate_document(
    text: str,
    path: str,
    schema: SchemaSnapshot | SchemaRegistry,
    options: ValidationOptions | None = None,
    *,
    mode: ValidationMode | None = None,
) -> ValidationResult | None:
    """Dispatch on the document kind; returns None for paths that are neither kind."""
    kind = classify_document(path)
    logger.debug("Validating %s as %s document", path, kind)
    if kind == DocumentKind.TRANSLATION:
        return validate_translation_document(text, path, schema, options, mode=mode)
    if kind == DocumentKind.SCRIPT:
        return validate_script_document(text, schema, options, mode=mode)
    return None


def _resolve_schema(schema: SchemaSnapshot | SchemaRegistry) -> SchemaSnapshot:
    # read the registry once so the whole pass sees one snapshot
    if isinstance(schema, SchemaRegistry):
        return schema.snapshot
    return schema


def _resolve_options(options: ValidationOptions | None, mode: ValidationMode | None) -> ValidationOptions:
    if options is not None:
        if mode is not None:
            raise ValueError("Pass either options or mode, not both")
        return options
    if mode is not None:
        return ValidationOptions.for_mode(mode)
    return ValidationOptions()
