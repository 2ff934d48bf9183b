"""Defines the states a single hole of the board can be in"""

from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidLayoutError


class Cell(Enum):
    OUT_OF_BOARD = auto()
    EMPTY = auto()
    PEG = auto()

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        if symbol not in SYMBOL_TO_CELL:
            raise InvalidLayoutError(
                f"Unknown layout symbol {symbol!r}. Pick one from {', '.join(SYMBOL_TO_CELL)}"
            )
        return SYMBOL_TO_CELL[symbol]

    def to_symbol(self) -> str:
        return CELL_TO_SYMBOL[self]

    @property
    def is_playable(self) -> bool:
        """OUT_OF_BOARD cells never take part in a move"""
        return self != Cell.OUT_OF_BOARD


SYMBOL_TO_CELL: dict[str, Cell] = {
    "-": Cell.OUT_OF_BOARD,
    "0": Cell.EMPTY,
    "1": Cell.PEG,
}

CELL_TO_SYMBOL: dict[Cell, str] = {value: key for key, value in SYMBOL_TO_CELL.items()}
