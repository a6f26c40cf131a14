"""Helpers for loading schema snapshots from deserialized documents or JSON files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from zedscripts.schema.model import (
    BlockSchema,
    IdSpec,
    LanguageInfo,
    ParameterSchema,
    SchemaSnapshot,
    TranslationSchema,
)


class SchemaFormatError(ValueError):
    """A schema document does not have the expected mapping shape."""


def load_schema_snapshot(
    blocks: Mapping[str, Any] | None = None,
    translations: Mapping[str, Any] | None = None,
    languages: Mapping[str, Any] | None = None,
) -> SchemaSnapshot:
    """Build a snapshot from the block, translation-prefix and language-code documents."""
    block_schemas = {
        name: _block_schema(name, _mapping(data, f"block {name!r}"))
        for name, data in _mapping(blocks or {}, "block document").items()
    }
    translation_schemas: dict[str, TranslationSchema] = {}
    for key, data in _mapping(translations or {}, "translation document").items():
        schema = _translation_schema(key, _mapping(data, f"translation file {key!r}"))
        translation_schemas[schema.file_prefix] = schema
    language_infos = {
        code: _language_info(code, _mapping(data, f"language {code!r}"))
        for code, data in _mapping(languages or {}, "language document").items()
    }
    return SchemaSnapshot.build(block_schemas, translation_schemas, language_infos)


def load_schema_files(
    blocks_path: str | Path,
    translations_path: str | Path | None = None,
    languages_path: str | Path | None = None,
) -> SchemaSnapshot:
    return load_schema_snapshot(
        _read_json(blocks_path),
        _read_json(translations_path) if translations_path is not None else None,
        _read_json(languages_path) if languages_path is not None else None,
    )


def load_schema_directory(root: str | Path) -> SchemaSnapshot:
    """Load `scriptBlocks.json`, `translationFiles.json` and `languageCodes.json` from one directory."""
    root_path = Path(root)
    translations_path = root_path / "translationFiles.json"
    languages_path = root_path / "languageCodes.json"
    return load_schema_files(
        root_path / "scriptBlocks.json",
        translations_path if translations_path.is_file() else None,
        languages_path if languages_path.is_file() else None,
    )


def _read_json(path: str | Path) -> Any:
    with Path(path).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SchemaFormatError(f"Expected a mapping for {what}, got {type(data).__name__}")
    return data


def _names(data: Mapping[str, Any], *keys: str) -> tuple[str, ...]:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            return (value,)
        return tuple(str(item) for item in value)
    return ()


def _block_schema(name: str, data: Mapping[str, Any]) -> BlockSchema:
    id_data = data.get("ID")
    id_spec: IdSpec | None = None
    if id_data is not None:
        id_data = _mapping(id_data, f"ID of block {name!r}")
        id_spec = IdSpec(
            valid_values=_names(id_data, "values", "validValues"),
            parents_exempt_from_id=_names(id_data, "parentsExemptFromID", "parentsWithout"),
            id_becomes_subtype=bool(id_data.get("idBecomesSubtype", id_data.get("asType", False))),
        )

    parameters: dict[str, ParameterSchema] | None = None
    raw_parameters = data.get("parameters")
    if raw_parameters is not None:
        parameters = {}
        for parameter_name, parameter_data in _mapping(raw_parameters, f"parameters of block {name!r}").items():
            parameter_data = _mapping(parameter_data or {}, f"parameter {parameter_name!r}")
            parameters[parameter_name.lower()] = ParameterSchema(
                name=str(parameter_data.get("name", parameter_name)),
                description=str(parameter_data.get("description", "")),
                allowed_duplicate=bool(parameter_data.get("allowedDuplicate", False)),
                can_be_empty=bool(parameter_data.get("canBeEmpty", False)),
            )

    return BlockSchema(
        name=str(data.get("name", name)),
        description=str(data.get("description", "")),
        should_have_parent=bool(data.get("shouldHaveParent", False)),
        parents=_names(data, "parents"),
        needs_children=_names(data, "needsChildren"),
        id_spec=id_spec,
        parameters=parameters,
    )


def _translation_schema(key: str, data: Mapping[str, Any]) -> TranslationSchema:
    file_prefix = data.get("filePrefix")
    if not isinstance(file_prefix, str):
        raise SchemaFormatError(f"Translation file {key!r} is missing a string filePrefix")
    return TranslationSchema(
        key=key,
        file_prefix=file_prefix,
        name=str(data.get("name", key)),
        description=str(data.get("description", "")),
        file_starter=str(data.get("fileStarter", "")),
    )


def _language_info(code: str, data: Mapping[str, Any]) -> LanguageInfo:
    return LanguageInfo(
        code=code,
        name=str(data.get("name", code)),
        language_name=str(data.get("languageName", "")),
        encoding=str(data.get("encoding", "")),
    )
