"""
A position (row, column) on the board

(placed in its own module as the board, the jump rules, and the engine all need it)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Position) -> Position:
        """Only meaningful when both coordinate differences are even (which is the case for every jump)"""
        return Position((self.row + other.row) // 2, (self.col + other.col) // 2)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)
