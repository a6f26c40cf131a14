"""Diagnostic codes and message templates.

Messages are templates: `{name}` placeholders are filled by
`zedscripts.diagnostics.report.format_message`.
"""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning", "hint", "info"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    severity: Severity = "error"
    category: str | None = None


UNMATCHED_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unmatchedBrace",
    message="Missing closing bracket '}' for '{scriptBlock}' block",
    category="structure",
)

NOT_VALID_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="notValidBlock",
    message="'{scriptBlock}' is an unknown script block",
    category="structure",
)

MISSING_PARENT_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingParentBlock",
    message="'{scriptBlock}' block must be inside a valid parent block: {parentBlocks}",
    category="hierarchy",
)

HAS_PARENT_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="hasParentBlock",
    message="'{scriptBlock}' block cannot be inside any parent block",
    category="hierarchy",
)

WRONG_PARENT_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="wrongParentBlock",
    message=(
        "'{scriptBlock}' block cannot be inside parent block '{parentBlock}'. "
        "Valid parent blocks are: {parentBlocks}"
    ),
    category="hierarchy",
)

MISSING_CHILD_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingChildBlock",
    message="'{scriptBlock}' block is missing child block '{childBlock}'. Required child blocks are: {childBlocks}",
    category="hierarchy",
)

MISSING_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingID",
    message="'{scriptBlock}' block is missing an ID",
    category="identity",
)

HAS_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="hasID",
    message="'{scriptBlock}' block cannot have an ID",
    category="identity",
)

INVALID_ID: Final[DiagnosticSpec] = DiagnosticSpec(
    code="invalidID",
    message="'{scriptBlock}' block has an invalid ID '{id}'. Valid IDs are: {validIDs}",
    category="identity",
)

HAS_ID_IN_PARENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="hasIDinParent",
    message=(
        "'{scriptBlock}' block cannot have an ID when inside parent block '{parentBlock}', "
        "only for: {validParentBlocks}"
    ),
    category="identity",
)

UNKNOWN_PARAMETER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unknownParameter",
    message="'{parameter}' is not a valid parameter for '{scriptBlock}' block",
    category="parameter",
)

DUPLICATE_PARAMETER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="duplicateParameter",
    message="'{parameter}' is already defined in '{scriptBlock}'",
    category="parameter",
)

MISSING_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingValue",
    message="'{parameter}' is missing a value",
    category="parameter",
)

MISSING_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingComma",
    message="Missing comma",
    category="parameter",
)

INVALID_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="invalidComma",
    message="Invalid separator '{separator}', expected ','",
    category="parameter",
)

UNMATCHED_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unmatchedCode",
    message="Folder language code '{folderCode}' does not match file language code '{fileCode}'",
    category="translation",
)

INVALID_FILE_PREFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="invalidFilePrefix",
    message="'{filePrefix}' is not a valid translation file prefix. Valid prefixes are: {validPrefixes}",
    category="translation",
)

NON_EXISTENT_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="nonExistentCode",
    message="'{code}' is not a known language code. Valid codes are: {validCodes}",
    category="translation",
)

MISSING_QUOTES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="missingQuotes",
    message="Translation value must be wrapped in double quotes",
    category="translation",
)

UNNECESSARY_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="unnecessaryComma",
    message="Trailing comma is not needed",
    severity="hint",
    category="translation",
)
