"""Brace-matching scanner for script block headers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from zedscripts.text import TextRange

logger = logging.getLogger(__name__)

# `NAME [id] {` where NAME starts a line or directly follows a brace/comma and
# the ID (possibly several words) sits on the same line as NAME.
_HEADER_RE = re.compile(
    r"(?:^|(?<=[{},]))[ \t]*(?P<type>[A-Za-z_]\w*)"
    r"(?:[ \t]+(?P<id>[^\s{}=,;](?:[^\n{}=,;]*[^\s{}=,;])?))?\s*\{",
    re.MULTILINE,
)
# quoted strings are matched first so comment markers inside them survive
_COMMENT_RE = re.compile(r'"(?:[^"\\\n]|\\.)*"|/\*.*?(?:\*/|\Z)|//[^\n]*', re.DOTALL)


def mask_comments(text: str) -> str:
    """Blank out `/* */` and `//` comments without moving any offset.

    Double-quoted strings are left untouched, so `"http://..."` stays a value.
    """

    def _blank(match: re.Match[str]) -> str:
        comment = match.group(0)
        if comment.startswith('"'):
            return comment
        return re.sub(r"[^\r\n]", " ", comment)

    return _COMMENT_RE.sub(_blank, text)


@dataclass(frozen=True, slots=True)
class RawBlockMatch:
    """One block header matched to its closing brace."""

    block_type: str
    id: str | None
    header_offset: int
    brace_offset: int
    end: int

    @property
    def range(self) -> TextRange:
        """Block body from just after `{` through the matching `}`."""
        return TextRange(self.brace_offset + 1, self.end)

    @property
    def span(self) -> TextRange:
        """Header plus body; the part of the parent's text owned by this block."""
        return TextRange(self.header_offset, self.end)


@dataclass(frozen=True, slots=True)
class UnmatchedBlock:
    block_type: str
    id: str | None
    header_offset: int
    brace_offset: int


@dataclass(frozen=True, slots=True)
class ScanResult:
    matches: tuple[RawBlockMatch, ...]
    unmatched: UnmatchedBlock | None = None


class BlockScanner:
    """Finds sibling blocks inside `[start, end)` of one text snapshot.

    The scan position lives on the instance and only moves through its own
    methods, so independent scanners never share matcher state.
    """

    def __init__(self, text: str, start: int = 0, end: int | None = None) -> None:
        self.text = text
        self.start = start
        self.end = len(text) if end is None else min(end, len(text))
        self.position = start

    def next_header(self) -> re.Match[str] | None:
        if self.position >= self.end:
            return None
        return _HEADER_RE.search(self.text, self.position, self.end)

    def find_closing_brace(self, brace_offset: int) -> int | None:
        """Offset of the `}` closing the `{` at `brace_offset`, if any."""
        depth = 1
        text = self.text
        for index in range(brace_offset + 1, self.end):
            char = text[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return index
        return None

    def scan(self) -> ScanResult:
        matches: list[RawBlockMatch] = []
        while True:
            header = self.next_header()
            if header is None:
                break
            brace_offset = header.end() - 1
            block_type = header.group("type")
            block_id = header.group("id")
            header_offset = header.start("type")

            close_offset = self.find_closing_brace(brace_offset)
            if close_offset is None:
                logger.warning("Unterminated '%s' block at offset %d", block_type, header_offset)
                self.position = self.end
                return ScanResult(
                    matches=tuple(matches),
                    unmatched=UnmatchedBlock(
                        block_type=block_type,
                        id=block_id,
                        header_offset=header_offset,
                        brace_offset=brace_offset,
                    ),
                )

            matches.append(
                RawBlockMatch(
                    block_type=block_type,
                    id=block_id,
                    header_offset=header_offset,
                    brace_offset=brace_offset,
                    end=close_offset + 1,
                )
            )
            self.position = close_offset + 1
        return ScanResult(matches=tuple(matches))


def scan_blocks(text: str, search_start: int = 0, search_end: int | None = None) -> ScanResult:
    return BlockScanner(text, search_start, search_end).scan()
