"""Diagnostics."""

from zedscripts.diagnostics.codes import (
    DUPLICATE_PARAMETER,
    HAS_ID,
    HAS_ID_IN_PARENT,
    HAS_PARENT_BLOCK,
    INVALID_COMMA,
    INVALID_FILE_PREFIX,
    INVALID_ID,
    MISSING_CHILD_BLOCK,
    MISSING_COMMA,
    MISSING_ID,
    MISSING_PARENT_BLOCK,
    MISSING_QUOTES,
    MISSING_VALUE,
    NON_EXISTENT_CODE,
    NOT_VALID_BLOCK,
    UNKNOWN_PARAMETER,
    UNMATCHED_BRACE,
    UNMATCHED_CODE,
    UNNECESSARY_COMMA,
    WRONG_PARENT_BLOCK,
    DiagnosticSpec,
    Severity,
)
from zedscripts.diagnostics.diagnostic import Diagnostic
from zedscripts.diagnostics.report import (
    collect_diagnostics,
    emit,
    format_message,
    has_errors,
    join_names,
)

__all__ = [
    "DUPLICATE_PARAMETER",
    "HAS_ID",
    "HAS_ID_IN_PARENT",
    "HAS_PARENT_BLOCK",
    "INVALID_COMMA",
    "INVALID_FILE_PREFIX",
    "INVALID_ID",
    "MISSING_CHILD_BLOCK",
    "MISSING_COMMA",
    "MISSING_ID",
    "MISSING_PARENT_BLOCK",
    "MISSING_QUOTES",
    "MISSING_VALUE",
    "NON_EXISTENT_CODE",
    "NOT_VALID_BLOCK",
    "UNKNOWN_PARAMETER",
    "UNMATCHED_BRACE",
    "UNMATCHED_CODE",
    "UNNECESSARY_COMMA",
    "WRONG_PARENT_BLOCK",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "emit",
    "format_message",
    "has_errors",
    "join_names",
]
