"""Unit tests for src/api/models.py"""

import pytest
from pydantic import ValidationError

from src.api.models import CellClickRequest, GameResponse
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import MoveResult


# -- Validation - CellClickRequest --
def test_valid_click() -> None:
    request = CellClickRequest(row=3, col=0)
    assert (request.row, request.col) == (3, 0)


@pytest.mark.parametrize("row, col", [(-1, 3), (3, -1), (-4, -4)])
def test_negative_coordinates(row: int, col: int) -> None:
    """Negative numbers are never a hole on the board. Large ones are simply ignored by the engine."""
    with pytest.raises(InvalidRequestError):
        _ = CellClickRequest(row=row, col=col)


def test_non_integer_coordinates() -> None:
    """Type coercion errors are left to pydantic"""
    with pytest.raises(ValidationError):
        _ = CellClickRequest(row="middle", col=3)


# -- GameResponse --
def test_game_response_serializes() -> None:
    response = GameResponse(
        board=["--1--"],
        selection=(0, 2),
        result=MoveResult.SELECT,
        game_started=True,
        game_over=False,
        is_win=False,
        pegs_remaining=1,
        message="",
        elapsed="00:03",
        history=[],
    )
    data = response.model_dump(mode="json")
    assert data["selection"] == [0, 2]
    assert data["result"] == "select"
    assert data["board"] == ["--1--"]
