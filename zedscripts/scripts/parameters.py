"""Extraction of `name = value,` parameter lines from a block's own text."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from zedscripts.scripts.tree import ScriptParameter
from zedscripts.text import TextRange

# a trailing `,` `;` `:` or `.` is read as the separator; any other character ends the value
_PARAMETER_RE = re.compile(
    r"(?:^|(?<=[{}]))[ \t]*(?P<name>[A-Za-z_][\w.:]*)[ \t]*=[ \t]*"
    r"(?P<value>[^\n]*?)[ \t]*(?P<separator>[,;:.]?)[ \t]*\r?$",
    re.MULTILINE,
)


def own_segments(body: TextRange, child_spans: Sequence[TextRange]) -> list[TextRange]:
    """Parts of `body` not covered by any child header or body."""
    segments: list[TextRange] = []
    cursor = body.start
    for span in sorted(child_spans):
        if span.start > cursor:
            segments.append(TextRange(cursor, span.start))
        cursor = max(cursor, span.end)
    if cursor < body.end:
        segments.append(TextRange(cursor, body.end))
    return segments


def parse_parameters(text: str, segments: Iterable[TextRange]) -> list[ScriptParameter]:
    """Parse parameter lines; repeats of a name after the first are flagged duplicate."""
    parameters: list[ScriptParameter] = []
    seen: set[str] = set()
    for segment in segments:
        for match in _PARAMETER_RE.finditer(text, segment.start, segment.end):
            name = match.group("name")
            lowered = name.lower()
            parameters.append(
                ScriptParameter(
                    name=name,
                    value=match.group("value"),
                    separator=match.group("separator"),
                    name_range=TextRange(match.start("name"), match.end("name")),
                    value_range=TextRange(match.start("value"), match.end("value")),
                    is_duplicate=lowered in seen,
                )
            )
            seen.add(lowered)
    return parameters
