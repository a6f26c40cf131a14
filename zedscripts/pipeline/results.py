"""Validation run result carriers for document entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from zedscripts.diagnostics import Diagnostic, has_errors
from zedscripts.schema import SchemaSnapshot
from zedscripts.scripts import ScriptBlock, ScriptTree
from zedscripts.text import LineIndex
from zedscripts.translation import TranslationFile, TranslationPath


@dataclass(frozen=True, slots=True)
class ScriptValidationResult:
    """Diagnostics plus the parse tree, kept for completion/hover consumers."""

    source_text: str
    schema: SchemaSnapshot
    tree: ScriptTree
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def find_block_containing(self, offset: int) -> ScriptBlock:
        return self.tree.find_block_containing(offset)

    def to_dicts(self) -> list[dict]:
        line_index = LineIndex(self.source_text)
        return [diagnostic.to_dict(line_index) for diagnostic in self.diagnostics]


@dataclass(frozen=True, slots=True)
class TranslationValidationResult:
    """Diagnostics for one translation file; `file` is None when file-level checks failed."""

    source_text: str
    schema: SchemaSnapshot
    path: TranslationPath
    file: TranslationFile | None
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def to_dicts(self) -> list[dict]:
        line_index = LineIndex(self.source_text)
        return [diagnostic.to_dict(line_index) for diagnostic in self.diagnostics]


ValidationResult: TypeAlias = ScriptValidationResult | TranslationValidationResult
