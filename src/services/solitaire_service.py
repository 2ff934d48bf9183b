"""Orchestration of a play session: everything the UI needs besides drawing (start/stop, clicks, undo, end-of-game message, timer)."""

import logging
from typing import Optional, Self

from src.api.models import CellClickRequest, GameResponse
from src.core.config import GAME_OVER_MESSAGE, INITIAL_LAYOUT, WIN_MESSAGE
from src.core.shared_types import MoveResult
from src.services.clock import GameClock
from src.solitaire.board import Board
from src.solitaire.engine import GameEngine, TerminalState
from src.solitaire.history import History

logger = logging.getLogger(__name__)


class SolitaireService:
    """Orchestration of engine, history and clock for a single player."""

    def __init__(
        self,
        engine: GameEngine,
        history: History,
        clock: GameClock,
        initial_layout: Board,
    ) -> None:
        self.engine = engine
        self.history = history
        self.clock = clock
        self.initial_layout = initial_layout.copy()

        # accepting clicks on the board (False before start, after stop and after game over)
        self.game_started = False
        # between start_game and stop_game. Undo stays available after game over.
        self._in_session = False
        self.message = ""
        self._last_result: Optional[MoveResult] = None

    @classmethod
    def with_defaults(cls, clock: Optional[GameClock] = None) -> Self:
        """The classic cross layout, a fresh history, and a real-time clock"""
        layout = Board.from_layout(INITIAL_LAYOUT)
        return cls(GameEngine(layout), History(), clock or GameClock(), layout)

    # -- UI actions ---
    def start_game(self) -> GameResponse:
        """Start a new game. Also used to restart a running one."""
        self.engine.reset(self.initial_layout)
        self.history.clear()
        self.clock.start()
        self.game_started = True
        self._in_session = True
        self.message = ""
        self._last_result = None
        logger.info("New game started")
        return self.get_game_state()

    def stop_game(self) -> GameResponse:
        """Back to the state before the first start"""
        self.engine.reset(self.initial_layout)
        self.history.clear()
        self.clock.reset()
        self.game_started = False
        self._in_session = False
        self.message = ""
        self._last_result = None
        logger.info("Game stopped")
        return self.get_game_state()

    def click_cell(self, request: CellClickRequest) -> GameResponse:
        """
        A click on the board.
        ----

        The state before the click is captured first, but only committed to the history when the click
        turns out to be a capture. Selecting pegs or failed jump attempts do not grow the history.
        """
        if not self.game_started:
            self._last_result = MoveResult.NO_ACTION
            return self.get_game_state()

        snapshot = self.engine.capture_state()
        result = self.engine.select_or_deselect(request.row, request.col)
        self._last_result = result

        if result == MoveResult.MOVE_SUCCESS:
            self.history.record(snapshot)
            self._check_game_status()

        return self.get_game_state()

    def undo(self) -> GameResponse:
        """Take back the last capture. Also reopens a game that just ended."""
        if self._in_session and self.history.undo(self.engine):
            if not self.game_started:
                self.game_started = True
                self.message = ""
                self.clock.resume()
            self._last_result = None
        return self.get_game_state()

    def get_game_state(self) -> GameResponse:
        model = self.engine.to_model()
        status = self.engine.evaluate_terminal_state()
        return GameResponse(
            board=model.board,
            selection=model.selection,
            result=self._last_result,
            game_started=self.game_started,
            game_over=self._in_session and status.game_over,
            is_win=self._in_session and status.is_win,
            pegs_remaining=status.pegs_remaining,
            message=self.message,
            elapsed=self.clock.format_elapsed(),
            history=self.history.labels(),
        )

    # -- Internal helpers --
    def _check_game_status(self) -> None:
        status = self.engine.evaluate_terminal_state()
        if not status.game_over:
            self.message = ""
            return

        self.clock.stop()
        self.game_started = False
        self.message = self._end_message(status)
        logger.info(
            "Game over after %s: %d pegs left", self.clock.format_elapsed(), status.pegs_remaining
        )

    @staticmethod
    def _end_message(status: TerminalState) -> str:
        if status.is_win:
            return WIN_MESSAGE
        return GAME_OVER_MESSAGE.format(pegs_remaining=status.pegs_remaining)
