from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

# A block is either a color tag ("red", "#a760ad") or a numeric label.
Block = Union[str, int]


class EmptyColumnError(IndexError):
    """Raised when popping from a column that holds no blocks."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is empty")
        self.column = column


@dataclass(slots=True)
class BlockBoard:
    """Fixed-length sequence of LIFO block columns.

    The logical and the visual state each own a separate instance; ``clone``
    copies every column so the two never share storage.
    """

    columns: List[List[Block]] = field(default_factory=list)

    @classmethod
    def from_columns(cls, columns: Iterable[Sequence[Block]], column_count: int | None = None) -> "BlockBoard":
        copied = [list(col) if col else [] for col in columns]
        if column_count is not None:
            if len(copied) > column_count:
                raise ValueError(f"Board has {len(copied)} columns, expected at most {column_count}")
            copied.extend([] for _ in range(column_count - len(copied)))
        return cls(columns=copied)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def push(self, column: int, block: Block) -> None:
        self.columns[column].append(block)

    def pop(self, column: int) -> Block:
        stack = self.columns[column]
        if not stack:
            raise EmptyColumnError(column)
        return stack.pop()

    def peek(self, column: int) -> Block | None:
        stack = self.columns[column]
        return stack[-1] if stack else None

    def height(self, column: int) -> int:
        if column < 0 or column >= len(self.columns):
            return 0
        return len(self.columns[column])

    def remove_all(self, block: Block) -> int:
        """Remove every occurrence of ``block`` from every column; returns how many were removed."""
        removed = 0
        for idx, stack in enumerate(self.columns):
            kept = [b for b in stack if b != block]
            removed += len(stack) - len(kept)
            self.columns[idx] = kept
        return removed

    def total_blocks(self) -> int:
        return sum(len(stack) for stack in self.columns)

    def clone(self) -> "BlockBoard":
        return BlockBoard(columns=[list(stack) for stack in self.columns])

    def as_tuples(self) -> Tuple[Tuple[Block, ...], ...]:
        return tuple(tuple(stack) for stack in self.columns)
