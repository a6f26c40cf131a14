"""Arena-backed parse tree of script blocks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from zedscripts.schema import DOCUMENT_BLOCK
from zedscripts.text import TextRange

ROOT_HANDLE = 0


@dataclass(frozen=True, slots=True)
class ScriptParameter:
    """One `name = value,` line owned by a single block."""

    name: str
    value: str
    separator: str
    name_range: TextRange
    value_range: TextRange
    is_duplicate: bool = False

    @property
    def separator_range(self) -> TextRange:
        return TextRange.at(self.value_range.end, len(self.separator))

    @property
    def range(self) -> TextRange:
        return self.name_range.cover(self.separator_range)


@dataclass(slots=True)
class ScriptBlock:
    """One node of the tree; links to other nodes are arena handles."""

    handle: int
    raw_type: str
    block_type: str
    id: str | None
    range: TextRange
    header_offset: int
    parent: int | None
    children: list[int] = field(default_factory=list)
    parameters: list[ScriptParameter] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def parameter(self, name: str) -> ScriptParameter | None:
        lowered = name.lower()
        for parameter in self.parameters:
            if parameter.name.lower() == lowered:
                return parameter
        return None

    def is_parameter_of(self, name: str) -> bool:
        return self.parameter(name) is not None


class ScriptTree:
    """Owns every block of one document; the root is the `_DOCUMENT` block."""

    def __init__(self, source_text: str) -> None:
        self.source_text = source_text
        self._blocks: list[ScriptBlock] = [
            ScriptBlock(
                handle=ROOT_HANDLE,
                raw_type=DOCUMENT_BLOCK,
                block_type=DOCUMENT_BLOCK,
                id=None,
                range=TextRange(0, len(source_text)),
                header_offset=0,
                parent=None,
            )
        ]

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def root(self) -> ScriptBlock:
        return self._blocks[ROOT_HANDLE]

    def get(self, handle: int) -> ScriptBlock:
        return self._blocks[handle]

    def add(
        self,
        parent: ScriptBlock,
        *,
        raw_type: str,
        block_type: str,
        block_id: str | None,
        range: TextRange,
        header_offset: int,
    ) -> ScriptBlock:
        block = ScriptBlock(
            handle=len(self._blocks),
            raw_type=raw_type,
            block_type=block_type,
            id=block_id,
            range=range,
            header_offset=header_offset,
            parent=parent.handle,
        )
        self._blocks.append(block)
        parent.children.append(block.handle)
        return block

    def parent_of(self, block: ScriptBlock) -> ScriptBlock | None:
        if block.parent is None:
            return None
        return self._blocks[block.parent]

    def children_of(self, block: ScriptBlock) -> list[ScriptBlock]:
        return [self._blocks[handle] for handle in block.children]

    def walk(self, block: ScriptBlock | None = None) -> Iterator[ScriptBlock]:
        """Pre-order traversal starting at `block` (the root by default)."""
        stack = [block if block is not None else self.root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(self._blocks[handle] for handle in reversed(current.children))

    def find_block_containing(self, offset: int) -> ScriptBlock:
        """Deepest block whose body contains `offset`; the root when none does."""
        current = self.root
        while True:
            for child in self.children_of(current):
                if child.range.contains(offset):
                    current = child
                    break
            else:
                return current
