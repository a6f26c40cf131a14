"""Models for translation file parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from zedscripts.schema import TranslationSchema
from zedscripts.text import TextRange


@dataclass(frozen=True, slots=True)
class TranslationPath:
    """Metadata derived from `.../Translate/<folderCode>/<prefix><fileCode>.txt`."""

    folder_code: str
    file_code: str
    file_prefix: str
    file_name: str

    @property
    def filename(self) -> str:
        """Canonical file name without extension."""
        return self.file_prefix + self.file_code


@dataclass(frozen=True, slots=True)
class TranslationEntry:
    """One `key = "value",` line."""

    key: str
    value: str
    quote: str
    comma: str
    key_range: TextRange
    value_range: TextRange
    quote_range: TextRange
    comma_range: TextRange
    line: int
    is_duplicate: bool = False

    @property
    def range(self) -> TextRange:
        """From the key through the comma (or the end of the value when there is none)."""
        return self.key_range.cover(self.value_range).cover(self.comma_range)


@dataclass(frozen=True, slots=True)
class TranslationFile:
    """Validated translation file with its entries in source order."""

    path: TranslationPath
    translation_schema: TranslationSchema
    entries: tuple[TranslationEntry, ...] = ()
    entries_by_key: Mapping[str, tuple[TranslationEntry, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def filename(self) -> str:
        return self.path.filename

    @property
    def file_starter(self) -> str:
        return self.translation_schema.file_starter

    @property
    def duplicate_keys(self) -> tuple[str, ...]:
        return tuple(key for key, entries in self.entries_by_key.items() if len(entries) > 1)

    def get(self, key: str) -> TranslationEntry | None:
        entries = self.entries_by_key.get(key)
        return entries[0] if entries else None

    def is_parameter_of(self, key: str) -> bool:
        return key in self.entries_by_key
