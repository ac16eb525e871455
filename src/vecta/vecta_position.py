"""
Source spans for VECTA tokens and AST nodes.

A `Position` records the byte offsets, line range and column range covered by a
piece of source text. Lines and columns are 0-based. Composite nodes widen the
span of their leftmost child with `extend` until it covers the whole construct.
"""

from typing import Any


class Position:
    """A source range attached to every token and AST node.

    Attributes:
        start (int): Byte offset of the first character.
        end (int): Byte offset one past the last character.
        line_start (int): Line of the first character.
        line_end (int): Line of the last character.
        column_start (int): Column of the first character.
        column_end (int): Column one past the last character.
    """

    __slots__ = ("start", "end", "line_start", "line_end", "column_start", "column_end")

    def __init__(
        self,
        start: int = 0,
        end: int = 0,
        line_start: int = 0,
        line_end: int = 0,
        column_start: int = 0,
        column_end: int = 0,
    ) -> None:
        self.start = start
        self.end = end
        self.line_start = line_start
        self.line_end = line_end
        self.column_start = column_start
        self.column_end = column_end

    def extend(self, other: "Position") -> None:
        """Widens this span in place so it also covers `other`. Never shrinks."""
        if other.line_end > self.line_end:
            self.line_end = other.line_end
        if other.column_end > self.column_end:
            self.column_end = other.column_end
        if other.end > self.end:
            self.end = other.end

    def copy(self) -> "Position":
        return Position(
            self.start,
            self.end,
            self.line_start,
            self.line_end,
            self.column_start,
            self.column_end,
        )

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (
            self.start,
            self.end,
            self.line_start,
            self.line_end,
            self.column_start,
            self.column_end,
        )

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Position) and self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __repr__(self) -> str:
        return (
            f"Position({self.start}, {self.end}, {self.line_start}, "
            f"{self.line_end}, {self.column_start}, {self.column_end})"
        )

    def __str__(self) -> str:
        return f"<ln: {self.line_start}, column: {self.column_start}>"


__all__ = ["Position"]
