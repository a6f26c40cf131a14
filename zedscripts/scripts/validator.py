"""Schema-driven validation of script block trees."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from zedscripts.diagnostics import NOT_VALID_BLOCK, UNMATCHED_BRACE, Diagnostic, emit
from zedscripts.options import ValidationOptions
from zedscripts.schema import DOCUMENT_BLOCK, BlockSchema, SchemaSnapshot
from zedscripts.scripts.parameters import own_segments, parse_parameters
from zedscripts.scripts.rules import (
    BlockContext,
    BlockRule,
    ParameterRule,
    default_block_rules,
    validate_block_rules,
)
from zedscripts.scripts.scanner import RawBlockMatch, ScanResult, mask_comments, scan_blocks
from zedscripts.scripts.tree import ScriptBlock, ScriptTree
from zedscripts.text import TextRange

logger = logging.getLogger(__name__)


def resolve_effective_type(
    raw_type: str,
    block_id: str | None,
    block_schema: BlockSchema | None,
    *,
    id_allowed: bool = True,
) -> tuple[str, str | None]:
    """Fold a type-defining ID into the block type.

    Returns `(effective_type, remaining_id)`. Promotion only happens when the
    schema marks the ID as a subtype, the ID is allowed where the block sits
    and it passes the valid-values check.
    """
    if block_schema is None or block_id is None or not id_allowed:
        return raw_type, block_id
    id_spec = block_schema.id_spec
    if id_spec is None or not id_spec.id_becomes_subtype:
        return raw_type, block_id
    if not id_spec.is_valid_value(block_id):
        return raw_type, block_id
    return f"{raw_type} {block_id}", None


def validate_script_text(
    text: str,
    schema: SchemaSnapshot,
    options: ValidationOptions | None = None,
    *,
    rules: Sequence[BlockRule] | None = None,
) -> tuple[ScriptTree, list[Diagnostic]]:
    """Scan and validate a whole script document in one pre-order pass."""
    resolved_options = options if options is not None else ValidationOptions()
    resolved_rules = tuple(rules) if rules is not None else default_block_rules()
    validate_block_rules(resolved_rules)
    if not resolved_options.check_parameters:
        resolved_rules = tuple(rule for rule in resolved_rules if not isinstance(rule, ParameterRule))

    builder = _TreeBuilder(text, schema, resolved_options, resolved_rules)
    builder.build()
    logger.debug(
        "Validated script document: %d blocks, %d diagnostics",
        len(builder.tree) - 1,
        len(builder.diagnostics),
    )
    return builder.tree, builder.diagnostics


class _TreeBuilder:
    def __init__(
        self,
        text: str,
        schema: SchemaSnapshot,
        options: ValidationOptions,
        rules: tuple[BlockRule, ...],
    ) -> None:
        self.schema = schema
        self.options = options
        self.rules = rules
        self.tree = ScriptTree(text)
        self.scan_text = mask_comments(text) if options.mask_comments else text
        self.diagnostics: list[Diagnostic] = []

    def build(self) -> None:
        root = self.tree.root
        self._visit_children(root, scan_blocks(self.scan_text, root.range.start, root.range.end))

    def _visit_children(self, parent: ScriptBlock, scan: ScanResult) -> None:
        for match in scan.matches:
            self._visit(match, parent)
        if scan.unmatched is not None:
            self.diagnostics.append(
                emit(
                    UNMATCHED_BRACE,
                    {"scriptBlock": scan.unmatched.block_type},
                    scan.unmatched.header_offset,
                )
            )

    def _visit(self, match: RawBlockMatch, parent: ScriptBlock) -> None:
        # the closing brace itself is not part of the children search
        child_scan = scan_blocks(self.scan_text, match.range.start, match.range.end - 1)

        block_schema = self.schema.find_block(match.block_type)
        if block_schema is None:
            self.diagnostics.append(
                emit(NOT_VALID_BLOCK, {"scriptBlock": match.block_type}, match.header_offset)
            )
            block = self._add(parent, match, match.block_type, match.id)
            self._visit_children(block, child_scan)
            return

        parent_types = self._parent_types(parent)
        id_allowed = block_schema.requires_id(*(parent_types or (DOCUMENT_BLOCK,)))
        effective_type, remaining_id = resolve_effective_type(
            match.block_type,
            match.id,
            block_schema,
            id_allowed=id_allowed,
        )
        effective_schema = self.schema.resolve_block(effective_type, match.block_type)

        parameters = parse_parameters(
            self.scan_text,
            own_segments(
                TextRange(match.range.start, match.range.end - 1),
                [child.span for child in child_scan.matches] + self._unmatched_span(child_scan, match),
            ),
        )
        context = BlockContext(
            block_type=match.block_type,
            effective_type=effective_type,
            block_id=match.id,
            header_offset=match.header_offset,
            schema=block_schema,
            effective_schema=effective_schema,
            parent_types=parent_types,
            children=child_scan.matches,
            parameters=tuple(parameters),
        )
        for rule in self.rules:
            self.diagnostics.extend(rule.run(context))

        block = self._add(parent, match, effective_type, remaining_id)
        block.parameters.extend(parameters)
        self._visit_children(block, child_scan)

    def _add(self, parent: ScriptBlock, match: RawBlockMatch, block_type: str, block_id: str | None) -> ScriptBlock:
        return self.tree.add(
            parent,
            raw_type=match.block_type,
            block_type=block_type,
            block_id=block_id,
            range=match.range,
            header_offset=match.header_offset,
        )

    @staticmethod
    def _parent_types(parent: ScriptBlock) -> tuple[str, ...]:
        if parent.is_root:
            return ()
        if parent.block_type == parent.raw_type:
            return (parent.block_type,)
        return (parent.block_type, parent.raw_type)

    @staticmethod
    def _unmatched_span(scan: ScanResult, match: RawBlockMatch) -> list[TextRange]:
        # an unterminated child swallows the rest of the body
        if scan.unmatched is None:
            return []
        return [TextRange(scan.unmatched.header_offset, match.range.end)]
