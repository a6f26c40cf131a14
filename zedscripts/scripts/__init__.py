"""Script block scanning, parse tree and schema validation."""

from zedscripts.scripts.parameters import own_segments, parse_parameters
from zedscripts.scripts.rules import (
    BlockContext,
    BlockRule,
    IdRule,
    ParameterRule,
    ParentRule,
    RequiredChildrenRule,
    default_block_rules,
)
from zedscripts.scripts.scanner import (
    BlockScanner,
    RawBlockMatch,
    ScanResult,
    UnmatchedBlock,
    mask_comments,
    scan_blocks,
)
from zedscripts.scripts.tree import ROOT_HANDLE, ScriptBlock, ScriptParameter, ScriptTree
from zedscripts.scripts.validator import resolve_effective_type, validate_script_text

__all__ = [
    "ROOT_HANDLE",
    "BlockContext",
    "BlockRule",
    "BlockScanner",
    "IdRule",
    "ParameterRule",
    "ParentRule",
    "RawBlockMatch",
    "RequiredChildrenRule",
    "ScanResult",
    "ScriptBlock",
    "ScriptParameter",
    "ScriptTree",
    "UnmatchedBlock",
    "default_block_rules",
    "mask_comments",
    "own_segments",
    "parse_parameters",
    "resolve_effective_type",
    "scan_blocks",
    "validate_script_text",
]
