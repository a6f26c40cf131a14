"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zedscripts.diagnostics.codes import Severity
from zedscripts.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the block and translation validators."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    category: str | None = None

    def to_dict(self, line_index: LineIndex | None = None) -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "range": {
                "startOffset": self.range.start,
                "endOffset": self.range.end,
            },
            "message": self.message,
            "severity": self.severity,
            "code": self.code,
        }
        if line_index is not None:
            start_line, start_character = line_index.position_at(self.range.start)
            end_line, end_character = line_index.position_at(self.range.end)
            rendered["range"]["start"] = {"line": start_line, "character": start_character}
            rendered["range"]["end"] = {"line": end_line, "character": end_character}
        return rendered
