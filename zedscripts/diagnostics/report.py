"""Diagnostics helpers."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping

from zedscripts.diagnostics.codes import DiagnosticSpec, Severity
from zedscripts.diagnostics.diagnostic import Diagnostic
from zedscripts.text import TextRange

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")


def format_message(template: str, params: Mapping[str, str]) -> str:
    """Fill `{name}` placeholders; unknown placeholders become empty strings."""
    return _PLACEHOLDER_RE.sub(lambda match: params.get(match.group(1), ""), template)


def emit(
    spec: DiagnosticSpec,
    params: Mapping[str, str],
    start: int,
    end: int | None = None,
    *,
    severity: Severity | None = None,
) -> Diagnostic:
    message = format_message(spec.message, params)
    diagnostic = Diagnostic(
        code=spec.code,
        message=message,
        range=TextRange(start, start if end is None else end),
        severity=severity if severity is not None else spec.severity,
        category=spec.category,
    )
    logger.debug("%s [%s] at %d..%d", message, spec.code, diagnostic.range.start, diagnostic.range.end)
    return diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def join_names(names: Iterable[str], *, quoted: bool = False) -> str:
    """Render a name list for a diagnostic message."""
    rendered = [f"'{name}'" if quoted else name for name in names]
    return ", ".join(rendered) if rendered else "none"
