"""
Geometry of a jump

A peg jumps over an orthogonally adjacent peg into the empty hole right behind it. The jumped peg is captured.
The four jump directions are kept in a fixed table.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Self

from src.solitaire.cell import Cell
from src.solitaire.position import Position


class Board(Protocol):
    """Just the parts the jump rules need"""

    def cell(self, position: Position) -> Optional[Cell]: ...
    def peg_positions(self) -> list[Position]: ...


Vector = tuple[int, int]

# (row delta, column delta): right, left, down, up
DIRECTIONS: tuple[Vector, ...] = ((0, 2), (0, -2), (2, 0), (-2, 0))


@dataclass(frozen=True)
class Jump:
    origin: Position
    over: Position
    landing: Position

    @classmethod
    def between(cls, origin: Position, landing: Position) -> Optional[Self]:
        """A jump only exists for a displacement of exactly two holes along a single axis.
        No diagonals, no single steps, no multi-jumps.
        """
        d_row = landing.row - origin.row
        d_col = landing.col - origin.col
        if (d_row, d_col) not in DIRECTIONS:
            return None
        return cls(origin, origin.midpoint(landing), landing)


def is_legal_jump(board: Board, jump: Jump) -> bool:
    """Origin holds a peg, it jumps over a peg, and lands in an empty hole on the board"""
    return (
        board.cell(jump.origin) == Cell.PEG
        and board.cell(jump.over) == Cell.PEG
        and board.cell(jump.landing) == Cell.EMPTY
    )


def available_jumps(board: Board) -> list[Jump]:
    """Every legal jump on the board: for each peg, try the four directions"""
    jumps: list[Jump] = []
    for origin in board.peg_positions():
        for d_row, d_col in DIRECTIONS:
            jump = Jump(
                origin=origin,
                over=origin.offset(d_row // 2, d_col // 2),
                landing=origin.offset(d_row, d_col),
            )
            if is_legal_jump(board, jump):
                jumps.append(jump)
    return jumps
