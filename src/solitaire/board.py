"""The board: a fixed rectangular grid of cells. Only structural queries live here, the rules of play live in the engine."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Self

from src.core.exceptions import InvalidLayoutError
from src.solitaire.cell import Cell
from src.solitaire.position import Position

Grid = list[list[Cell]]

SELECTED_SYMBOL = "*"


@dataclass
class Board:
    grid: Grid

    @classmethod
    def from_layout(cls, rows: Iterable[str]) -> Self:
        """Construct a board from rows of layout symbols.

        ex. the standard cross:
        --111--
        --111--
        1111111
        1110111
        1111111
        --111--
        --111--
        means:
        * '-' is outside the playing area
        * '1' holds a peg
        * '0' is an empty hole (only the center at the start of a game)
        """
        grid = [[Cell.from_symbol(symbol) for symbol in row] for row in rows]
        if not grid or not grid[0]:
            raise InvalidLayoutError("Layout must contain at least one row and column.")

        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise InvalidLayoutError(
                f"Layout must be rectangular. Row lengths: {[len(row) for row in grid]}"
            )
        return cls(grid)

    def to_layout(self) -> list[str]:
        return ["".join(cell.to_symbol() for cell in row) for row in self.grid]

    def copy(self) -> Self:
        """Structural clone: a fresh list for every row, so the copy never aliases this board."""
        return type(self)([list(row) for row in self.grid])

    @property
    def dimensions(self) -> tuple[int, int]:
        """(rows, columns)"""
        return len(self.grid), len(self.grid[0])

    def is_within_bounds(self, row: int, col: int) -> bool:
        n_rows, n_cols = self.dimensions
        return 0 <= row < n_rows and 0 <= col < n_cols

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        """None means 'off the grid'. Cell.OUT_OF_BOARD is inside the grid but inert."""
        if not self.is_within_bounds(row, col):
            return None
        return self.grid[row][col]

    def cell(self, position: Position) -> Optional[Cell]:
        return self.cell_at(position.row, position.col)

    def is_playable(self, row: int, col: int) -> bool:
        cell = self.cell_at(row, col)
        return cell is not None and cell.is_playable

    def set_cell(self, position: Position, cell: Cell) -> None:
        """Only the value of a cell may change, never the shape of the board"""
        self.grid[position.row][position.col] = cell

    def positions(self) -> Iterator[Position]:
        n_rows, n_cols = self.dimensions
        for row in range(n_rows):
            for col in range(n_cols):
                yield Position(row, col)

    def peg_positions(self) -> list[Position]:
        return [position for position in self.positions() if self.cell(position) == Cell.PEG]

    def count_pegs(self) -> int:
        return sum(row.count(Cell.PEG) for row in self.grid)

    def pretty(self, selection: Optional[Position] = None) -> str:
        """Text rendering. The selected peg (if any) is shown as '*'"""
        lines: list[str] = []
        for row_idx, row in enumerate(self.grid):
            symbols = [
                SELECTED_SYMBOL
                if selection == Position(row_idx, col_idx)
                else cell.to_symbol()
                for col_idx, cell in enumerate(row)
            ]
            lines.append(" ".join(symbols))
        return "\n".join(lines)
