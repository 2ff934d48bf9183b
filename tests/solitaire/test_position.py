"""Unit tests for /src/solitaire/position.py"""

import pytest

from src.solitaire.position import Position


def test_offset() -> None:
    assert Position(3, 3).offset(-2, 0) == Position(1, 3)
    assert Position(3, 3).offset(0, 2) == Position(3, 5)


@pytest.mark.parametrize(
    "start, end, middle",
    [
        (Position(3, 1), Position(3, 3), Position(3, 2)),
        (Position(3, 3), Position(3, 1), Position(3, 2)),
        (Position(0, 2), Position(2, 2), Position(1, 2)),
        (Position(4, 4), Position(2, 4), Position(3, 4)),
    ],
)
def test_midpoint(start: Position, end: Position, middle: Position) -> None:
    """Symmetric, and works in both directions along both axes"""
    assert start.midpoint(end) == middle
    assert end.midpoint(start) == middle


def test_positions_are_hashable_values() -> None:
    """Frozen: used as keys and compared by value"""
    assert Position(1, 2) == Position(1, 2)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2
    assert Position(1, 2).to_tuple() == (1, 2)
