"""Immutable schema snapshot models for script blocks and translation files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DOCUMENT_BLOCK = "_DOCUMENT"


class SchemaLookupError(LookupError):
    """A schema entry vanished after it already passed an existence check.

    Signals a registry/validator desynchronisation, never malformed user input.
    """


@dataclass(frozen=True, slots=True)
class ParameterSchema:
    name: str
    description: str = ""
    allowed_duplicate: bool = False
    can_be_empty: bool = False


@dataclass(frozen=True, slots=True)
class IdSpec:
    """How a block's ID is validated and whether it promotes into the block type."""

    valid_values: tuple[str, ...] = ()
    parents_exempt_from_id: tuple[str, ...] = ()
    id_becomes_subtype: bool = False

    def is_valid_value(self, block_id: str) -> bool:
        if not self.valid_values:
            return True
        return block_id in self.valid_values


@dataclass(frozen=True, slots=True)
class BlockSchema:
    """Rules for one script block type."""

    name: str
    description: str = ""
    should_have_parent: bool = False
    parents: tuple[str, ...] = ()
    needs_children: tuple[str, ...] = ()
    id_spec: IdSpec | None = None
    # None disables unknown-parameter checks; keys are lowercased names.
    parameters: Mapping[str, ParameterSchema] | None = None

    def parameter(self, name: str) -> ParameterSchema | None:
        if self.parameters is None:
            return None
        return self.parameters.get(name.lower())

    def accepts_parent(self, *parent_types: str) -> bool:
        allowed = {parent.lower() for parent in self.parents}
        return any(parent_type.lower() in allowed for parent_type in parent_types)

    def requires_id(self, *parent_types: str) -> bool:
        """An ID is required unless the parent is listed as ID-exempt."""
        if self.id_spec is None:
            return False
        exempt = {parent.lower() for parent in self.id_spec.parents_exempt_from_id}
        return not any(parent_type.lower() in exempt for parent_type in parent_types)

    def parents_allowing_id(self) -> tuple[str, ...]:
        if self.id_spec is None:
            return ()
        exempt = {parent.lower() for parent in self.id_spec.parents_exempt_from_id}
        return tuple(parent for parent in self.parents if parent.lower() not in exempt)


@dataclass(frozen=True, slots=True)
class TranslationSchema:
    key: str
    file_prefix: str
    name: str = ""
    description: str = ""
    file_starter: str = ""


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    code: str
    name: str = ""
    language_name: str = ""
    encoding: str = ""


@dataclass(frozen=True, slots=True)
class SchemaSnapshot:
    """One consistent, read-only view of every schema document.

    Never mutated after construction; `SchemaRegistry.replace` swaps whole snapshots.
    """

    blocks: Mapping[str, BlockSchema] = field(default_factory=lambda: MappingProxyType({}))
    translations: Mapping[str, TranslationSchema] = field(default_factory=lambda: MappingProxyType({}))
    languages: Mapping[str, LanguageInfo] = field(default_factory=lambda: MappingProxyType({}))

    @staticmethod
    def build(
        blocks: Mapping[str, BlockSchema] | None = None,
        translations: Mapping[str, TranslationSchema] | None = None,
        languages: Mapping[str, LanguageInfo] | None = None,
    ) -> SchemaSnapshot:
        """Create a snapshot; block names are indexed case-insensitively."""
        return SchemaSnapshot(
            blocks=MappingProxyType({name.lower(): schema for name, schema in (blocks or {}).items()}),
            translations=MappingProxyType(dict(translations or {})),
            languages=MappingProxyType(dict(languages or {})),
        )

    @property
    def block_names(self) -> tuple[str, ...]:
        return tuple(schema.name for schema in self.blocks.values())

    def is_block(self, name: str) -> bool:
        return name.lower() in self.blocks

    def find_block(self, name: str) -> BlockSchema | None:
        return self.blocks.get(name.lower())

    def block(self, name: str) -> BlockSchema:
        schema = self.blocks.get(name.lower())
        if schema is None:
            raise SchemaLookupError(
                f"Block type {name!r} is not a known script block type. "
                "Check with is_block() before getting block data."
            )
        return schema

    def resolve_block(self, effective_type: str, raw_type: str) -> BlockSchema:
        """Schema for a possibly promoted subtype, falling back to the raw type."""
        schema = self.find_block(effective_type)
        if schema is not None:
            return schema
        return self.block(raw_type)

    @property
    def file_prefixes(self) -> tuple[str, ...]:
        return tuple(sorted(self.translations))

    def is_translation_prefix(self, prefix: str) -> bool:
        return prefix in self.translations

    def translation(self, prefix: str) -> TranslationSchema:
        schema = self.translations.get(prefix)
        if schema is None:
            raise SchemaLookupError(f"Translation file prefix {prefix!r} is not defined in the schema")
        return schema

    @property
    def language_codes(self) -> tuple[str, ...]:
        return tuple(sorted(self.languages))

    def is_language_code(self, code: str) -> bool:
        return code in self.languages
