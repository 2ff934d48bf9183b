"""
The GameEngine is the entrypoint into the domain layer for the service layer.
It is the only owner of the board + selected peg, and the only place where the rules of play are enforced.

The engine never raises for bad input from the player: a click that does nothing useful
(wrong hole, illegal jump, coordinates off the grid) is reported as MoveResult.NO_ACTION.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.core.shared_types import MoveResult
from src.solitaire.board import Board
from src.solitaire.cell import Cell
from src.solitaire.moves import Jump, available_jumps, is_legal_jump
from src.solitaire.position import Position
from src.solitaire.snapshot import Snapshot
from src.solitaire.state import EngineState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalState:
    game_over: bool
    is_win: bool
    pegs_remaining: int
    available_moves: int


class GameEngine:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    def __init__(self, layout: Board) -> None:
        self._state = EngineState(board=layout.copy())

    @property
    def board(self) -> Board:
        """A copy: renderers can look, but not touch"""
        return self._state.board.copy()

    @property
    def selection(self) -> Optional[Position]:
        return self._state.selection

    def reset(self, layout: Board) -> None:
        """Start over from the given layout, nothing selected."""
        self._state = EngineState(board=layout.copy())

    def select_or_deselect(self, row: int, col: int) -> MoveResult:
        """
        Handle a click on the hole at (row, col)
        ----

        * peg: toggle the selection (clicking the selected peg again clears it)
        * empty hole while a peg is selected: try to jump the selected peg into it
        * anything else (empty hole and nothing selected, outside the cross, off the grid): nothing happens
        """
        cell = self._state.board.cell_at(row, col)

        if cell == Cell.PEG:
            self._toggle_selection(Position(row, col))
            return MoveResult.SELECT

        selection = self._state.selection
        if cell == Cell.EMPTY and selection is not None:
            if self.attempt_move(selection.row, selection.col, row, col):
                self._state.selection = None
                return MoveResult.MOVE_SUCCESS

        logger.debug("No action for click on (%d, %d): %s", row, col, cell)
        return MoveResult.NO_ACTION

    def attempt_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """
        Jump the peg at (from_row, from_col) into (to_row, to_col), capturing the peg in between.
        ----

        Legal iff the displacement is exactly two holes along one axis, the midpoint holds a peg,
        the origin holds a peg and the destination is an empty hole.
        NOTE: select_or_deselect already guarantees the last two, but the check is repeated here so
        the method is safe to call on its own.

        Returns False (and leaves the board untouched) for an illegal move.
        """
        jump = Jump.between(Position(from_row, from_col), Position(to_row, to_col))
        if jump is None or not is_legal_jump(self._state.board, jump):
            return False

        self._update_board(jump)
        return True

    def evaluate_terminal_state(self) -> TerminalState:
        """Game is over when a single peg remains (a win) or when no peg can jump anymore (a loss)."""
        board = self._state.board
        pegs_remaining = board.count_pegs()
        n_moves = len(available_jumps(board))
        return TerminalState(
            game_over=pegs_remaining == 1 or n_moves == 0,
            is_win=pegs_remaining == 1,
            pegs_remaining=pegs_remaining,
            available_moves=n_moves,
        )

    def capture_state(self) -> Snapshot:
        return Snapshot.capture(self._state)

    def restore_state(self, snapshot: Snapshot) -> None:
        restored = snapshot.state()
        if restored.board.dimensions != self._state.board.dimensions:
            raise GameStateError(
                f"Cannot restore a {restored.board.dimensions} snapshot onto a {self._state.board.dimensions} board."
            )
        self._state = restored

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        selection = self._state.selection
        return GameModel(
            board=self._state.board.to_layout(),
            selection=selection.to_tuple() if selection else None,
        )

    # -- PRIVATE HELPERS ---
    def _toggle_selection(self, position: Position) -> None:
        self._state.selection = None if self._state.selection == position else position

    def _update_board(self, jump: Jump) -> None:
        board = self._state.board
        board.set_cell(jump.origin, Cell.EMPTY)
        board.set_cell(jump.over, Cell.EMPTY)
        board.set_cell(jump.landing, Cell.PEG)
        logger.debug(
            "Jump %s -> %s captured %s, %d pegs left",
            jump.origin.to_tuple(),
            jump.landing.to_tuple(),
            jump.over.to_tuple(),
            board.count_pegs(),
        )
