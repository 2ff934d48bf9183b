"""The complete mutable state of a running game."""

from dataclasses import dataclass
from typing import Optional, Self

from src.solitaire.board import Board
from src.solitaire.position import Position


@dataclass
class EngineState:
    board: Board
    selection: Optional[Position] = None

    def copy(self) -> Self:
        # Position is frozen, so sharing it is safe. The board needs an explicit clone.
        return type(self)(self.board.copy(), self.selection)
