"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.config import INITIAL_LAYOUT
from src.solitaire.board import Board
from src.solitaire.engine import GameEngine

EMPTY_CROSS = (
    "--000--",
    "--000--",
    "0000000",
    "0000000",
    "0000000",
    "--000--",
    "--000--",
)


@pytest.fixture
def initial_board() -> Board:
    """The classic starting position: 32 pegs, center hole empty."""
    return Board.from_layout(INITIAL_LAYOUT)


@pytest.fixture
def engine(initial_board: Board) -> GameEngine:
    return GameEngine(initial_board)


@pytest.fixture
def board_with_pegs() -> Callable[..., Board]:
    """Call the inner function with the (row, col) coordinates that should hold a peg. All other holes on the cross are empty."""

    def _create_board(*pegs: tuple[int, int]) -> Board:
        rows = [list(row) for row in EMPTY_CROSS]
        for row, col in pegs:
            rows[row][col] = "1"
        return Board.from_layout("".join(row) for row in rows)

    return _create_board
