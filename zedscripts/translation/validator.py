"""File-level and per-entry checks for translation files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from types import MappingProxyType

from zedscripts.diagnostics import (
    DUPLICATE_PARAMETER,
    INVALID_FILE_PREFIX,
    MISSING_QUOTES,
    NON_EXISTENT_CODE,
    UNMATCHED_CODE,
    UNNECESSARY_COMMA,
    Diagnostic,
    emit,
    join_names,
)
from zedscripts.schema import SchemaSnapshot
from zedscripts.translation.model import TranslationEntry, TranslationFile, TranslationPath
from zedscripts.translation.parser import (
    DEFAULT_COMMENT_PREFIXES,
    RawTranslationEntry,
    parse_translation_lines,
)

logger = logging.getLogger(__name__)


def validate_translation_text(
    source_text: str,
    path: TranslationPath,
    schema: SchemaSnapshot,
    *,
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> tuple[TranslationFile | None, list[Diagnostic]]:
    """Validate one translation file.

    File-level problems span the whole document and stop entry extraction,
    in which case no `TranslationFile` is returned.
    """
    diagnostics = _check_file(source_text, path, schema)
    if diagnostics:
        return None, diagnostics

    translation_schema = schema.translation(path.file_prefix)

    entries: list[TranslationEntry] = []
    first_index_by_key: dict[str, int] = {}
    for raw in parse_translation_lines(source_text, comment_prefixes=comment_prefixes):
        first_index = first_index_by_key.get(raw.key)
        is_duplicate = first_index is not None
        if first_index is not None and not entries[first_index].is_duplicate:
            first = _as_duplicate(entries[first_index])
            entries[first_index] = first
            diagnostics.append(_duplicate_diagnostic(first, path))

        entry = _entry(raw, is_duplicate=is_duplicate)
        entries.append(entry)
        if first_index is None:
            first_index_by_key[raw.key] = len(entries) - 1
        diagnostics.extend(_check_entry(entry, path))

    entries_by_key: dict[str, list[TranslationEntry]] = {}
    for entry in entries:
        entries_by_key.setdefault(entry.key, []).append(entry)

    logger.debug("Validated translation file %s: %d entries", path.file_name, len(entries))
    translation_file = TranslationFile(
        path=path,
        translation_schema=translation_schema,
        entries=tuple(entries),
        entries_by_key=MappingProxyType({key: tuple(group) for key, group in entries_by_key.items()}),
    )
    return translation_file, diagnostics


def _check_file(source_text: str, path: TranslationPath, schema: SchemaSnapshot) -> list[Diagnostic]:
    document_end = len(source_text)
    if path.folder_code != path.file_code:
        return [
            emit(
                UNMATCHED_CODE,
                {"folderCode": path.folder_code, "fileCode": path.file_code},
                0,
                document_end,
            )
        ]
    if not schema.is_translation_prefix(path.file_prefix):
        return [
            emit(
                INVALID_FILE_PREFIX,
                {"filePrefix": path.file_prefix, "validPrefixes": join_names(schema.file_prefixes, quoted=True)},
                0,
                document_end,
            )
        ]
    # an empty language table means codes are not restricted
    if schema.languages and not schema.is_language_code(path.folder_code):
        return [
            emit(
                NON_EXISTENT_CODE,
                {"code": path.folder_code, "validCodes": join_names(schema.language_codes, quoted=True)},
                0,
                document_end,
            )
        ]
    return []


def _check_entry(entry: TranslationEntry, path: TranslationPath) -> list[Diagnostic]:
    if entry.is_duplicate:
        return [_duplicate_diagnostic(entry, path)]

    diagnostics: list[Diagnostic] = []
    if entry.comma:
        diagnostics.append(emit(UNNECESSARY_COMMA, {}, entry.comma_range.start, entry.comma_range.end))
    if not entry.quote:
        diagnostics.append(emit(MISSING_QUOTES, {}, entry.value_range.start, entry.value_range.end))
    return diagnostics


def _duplicate_diagnostic(entry: TranslationEntry, path: TranslationPath) -> Diagnostic:
    return emit(
        DUPLICATE_PARAMETER,
        {"parameter": entry.key, "scriptBlock": path.filename},
        entry.range.start,
        entry.range.end,
        severity="warning",
    )


def _entry(raw: RawTranslationEntry, *, is_duplicate: bool) -> TranslationEntry:
    return TranslationEntry(
        key=raw.key,
        value=raw.value,
        quote=raw.quote,
        comma=raw.comma,
        key_range=raw.key_range,
        value_range=raw.value_range,
        quote_range=raw.quote_range,
        comma_range=raw.comma_range,
        line=raw.line,
        is_duplicate=is_duplicate,
    )


def _as_duplicate(entry: TranslationEntry) -> TranslationEntry:
    return replace(entry, is_duplicate=True)
