"""Block validation rules and rule contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from zedscripts.diagnostics import (
    DUPLICATE_PARAMETER,
    HAS_ID,
    HAS_ID_IN_PARENT,
    HAS_PARENT_BLOCK,
    INVALID_COMMA,
    INVALID_ID,
    MISSING_CHILD_BLOCK,
    MISSING_COMMA,
    MISSING_ID,
    MISSING_PARENT_BLOCK,
    MISSING_VALUE,
    UNKNOWN_PARAMETER,
    WRONG_PARENT_BLOCK,
    Diagnostic,
    emit,
    join_names,
)
from zedscripts.schema import DOCUMENT_BLOCK, BlockSchema
from zedscripts.scripts.scanner import RawBlockMatch
from zedscripts.scripts.tree import ScriptParameter


@dataclass(frozen=True, slots=True)
class BlockContext:
    """Everything a rule may look at for one block, before its children are validated.

    `schema` belongs to the scanned block type and drives parent and ID rules;
    `effective_schema` belongs to the promoted subtype (or the same entry) and
    drives children and parameter rules.

    `parent_types` holds the parent's effective type first, then its raw type
    when the two differ; it is empty for top-level blocks.
    """

    block_type: str
    effective_type: str
    block_id: str | None
    header_offset: int
    schema: BlockSchema
    effective_schema: BlockSchema
    parent_types: tuple[str, ...]
    children: tuple[RawBlockMatch, ...]
    parameters: tuple[ScriptParameter, ...]

    @property
    def has_parent(self) -> bool:
        return bool(self.parent_types)

    @property
    def parent_type(self) -> str:
        return self.parent_types[0] if self.parent_types else ""


class BlockRule(Protocol):
    """Contract for one independently removable block rule."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def run(self, context: BlockContext) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class ParentRule:
    code: str = "parent"
    name: str = "parentBlock"

    def run(self, context: BlockContext) -> list[Diagnostic]:
        schema = context.schema
        params = {
            "scriptBlock": context.block_type,
            "parentBlocks": join_names(schema.parents),
        }

        if not schema.should_have_parent:
            if context.has_parent:
                return [emit(HAS_PARENT_BLOCK, params, context.header_offset)]
            return []

        if not context.has_parent:
            return [emit(MISSING_PARENT_BLOCK, params, context.header_offset)]

        if schema.parents and not schema.accepts_parent(*context.parent_types):
            params["parentBlock"] = context.parent_type
            return [emit(WRONG_PARENT_BLOCK, params, context.header_offset)]
        return []


@dataclass(frozen=True, slots=True)
class IdRule:
    code: str = "id"
    name: str = "blockId"

    def run(self, context: BlockContext) -> list[Diagnostic]:
        schema = context.schema
        block_id = context.block_id
        has_id = block_id is not None
        params = {"scriptBlock": context.block_type}

        id_spec = schema.id_spec
        if id_spec is None:
            if has_id:
                return [emit(HAS_ID, params, context.header_offset)]
            return []

        requires_id = schema.requires_id(*(context.parent_types or (DOCUMENT_BLOCK,)))
        if requires_id and not has_id:
            return [emit(MISSING_ID, params, context.header_offset)]
        if has_id and not requires_id:
            params["parentBlock"] = context.parent_type
            params["validParentBlocks"] = join_names(schema.parents_allowing_id())
            return [emit(HAS_ID_IN_PARENT, params, context.header_offset)]
        if block_id is not None and not id_spec.is_valid_value(block_id):
            params["id"] = block_id
            params["validIDs"] = join_names(id_spec.valid_values)
            return [emit(INVALID_ID, params, context.header_offset)]
        return []


@dataclass(frozen=True, slots=True)
class RequiredChildrenRule:
    """Direct children must cover every type listed in `needs_children`."""

    code: str = "children"
    name: str = "requiredChildren"

    def run(self, context: BlockContext) -> list[Diagnostic]:
        required = context.effective_schema.needs_children
        if not required:
            return []

        present: set[str] = set()
        for child in context.children:
            present.add(child.block_type.lower())
            if child.id is not None:
                present.add(f"{child.block_type} {child.id}".lower())

        diagnostics: list[Diagnostic] = []
        for child_type in required:
            if child_type.lower() in present:
                continue
            diagnostics.append(
                emit(
                    MISSING_CHILD_BLOCK,
                    {
                        "scriptBlock": context.effective_type,
                        "childBlock": child_type,
                        "childBlocks": join_names(required),
                    },
                    context.header_offset,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ParameterRule:
    code: str = "parameters"
    name: str = "blockParameters"

    def run(self, context: BlockContext) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for parameter in context.parameters:
            diagnostic = self._check(context, parameter)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def _check(self, context: BlockContext, parameter: ScriptParameter) -> Diagnostic | None:
        schema = context.effective_schema
        params = {"parameter": parameter.name, "scriptBlock": context.effective_type}
        name_range = parameter.name_range

        parameter_schema = schema.parameter(parameter.name)
        if schema.parameters is not None and parameter_schema is None:
            return emit(UNKNOWN_PARAMETER, params, name_range.start, name_range.end)

        if parameter.is_duplicate and not (parameter_schema and parameter_schema.allowed_duplicate):
            return emit(DUPLICATE_PARAMETER, params, name_range.start, name_range.end)

        if parameter.value == "" and not (parameter_schema and parameter_schema.can_be_empty):
            return emit(MISSING_VALUE, params, name_range.start, parameter.value_range.end)

        if parameter.separator == "":
            return emit(MISSING_COMMA, params, name_range.start, parameter.value_range.end)
        if parameter.separator != ",":
            params["separator"] = parameter.separator
            return emit(INVALID_COMMA, params, name_range.start, parameter.separator_range.end)
        return None


def default_block_rules() -> tuple[BlockRule, ...]:
    return (
        ParentRule(),
        IdRule(),
        RequiredChildrenRule(),
        ParameterRule(),
    )


def validate_block_rules(rules: Sequence[BlockRule]) -> None:
    seen: set[str] = set()
    for rule in rules:
        if rule.code in seen:
            raise ValueError(f"Duplicate block rule code: {rule.code}")
        seen.add(rule.code)
