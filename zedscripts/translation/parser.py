"""Line scanner for `key = "value",` translation entries."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from zedscripts.text import TextRange

_ENTRY_RE = re.compile(
    r'^[ \t]*(?P<key>[^\s="]+)[ \t]*=[ \t]*(?P<quote>"?)(?P<value>.*?)"?[ \t]*(?P<comma>,?)[ \t]*$'
)

DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = ("--", "//", "/*", "*")


@dataclass(frozen=True, slots=True)
class _LineInfo:
    number: int
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class RawTranslationEntry:
    key: str
    value: str
    quote: str
    comma: str
    key_range: TextRange
    value_range: TextRange
    quote_range: TextRange
    comma_range: TextRange
    line: int


def parse_translation_lines(
    source_text: str,
    *,
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> Iterator[RawTranslationEntry]:
    """Yield entries from every line after the first (the file starter).

    Lines that are comments or do not look like an entry are skipped silently.
    """
    prefixes = tuple(comment_prefixes)
    for line in _split_lines(source_text)[1:]:
        line_text = source_text[line.start : line.end]
        stripped = line_text.strip()
        if not stripped or stripped.startswith(prefixes):
            continue
        match = _ENTRY_RE.match(line_text)
        if match is None:
            continue

        def _range(group: str) -> TextRange:
            return TextRange(line.start + match.start(group), line.start + match.end(group))

        yield RawTranslationEntry(
            key=match.group("key"),
            value=match.group("value"),
            quote=match.group("quote"),
            comma=match.group("comma"),
            key_range=_range("key"),
            value_range=_range("value"),
            quote_range=_range("quote"),
            comma_range=_range("comma"),
            line=line.number,
        )


def _split_lines(source_text: str) -> list[_LineInfo]:
    # only "\n" (optionally after "\r") ends a line, as in LineIndex
    lines: list[_LineInfo] = []
    offset = 0
    for number, raw_line in enumerate(source_text.split("\n")):
        line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        lines.append(_LineInfo(number=number, start=offset, end=offset + len(line)))
        offset += len(raw_line) + 1
    return lines
