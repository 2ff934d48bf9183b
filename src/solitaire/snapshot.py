"""Immutable capture of the engine state, used by the History to undo moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.solitaire.board import Board
from src.solitaire.cell import Cell
from src.solitaire.position import Position
from src.solitaire.state import EngineState

FrozenGrid = tuple[tuple[Cell, ...], ...]

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Snapshot:
    """
    Board + selection at a point in time, plus a label for display.
    ----

    The grid is stored as a tuple of tuples so the snapshot cannot be changed after creation,
    and state() hands out a fresh EngineState on every call, never the stored grid itself.
    """

    grid: FrozenGrid
    selection: Optional[Position]
    created_at: datetime = field(default_factory=utc_now)

    @classmethod
    def capture(cls, state: EngineState) -> Snapshot:
        grid = tuple(tuple(row) for row in state.board.grid)
        return cls(grid=grid, selection=state.selection, created_at=utc_now())

    def state(self) -> EngineState:
        board = Board([list(row) for row in self.grid])
        return EngineState(board=board, selection=self.selection)

    @property
    def pegs_remaining(self) -> int:
        return sum(row.count(Cell.PEG) for row in self.grid)

    @property
    def label(self) -> str:
        """ex. '2026-10-18 14:03:59 / (31 pegs left)'"""
        return f"{self.created_at.strftime(DATE_FORMAT)} / ({self.pegs_remaining} pegs left)"
