"""
Boundary layer data model(s).

Transport-safe representation of the engine state. The service builds its responses from this,
so nothing outside the domain layer ever holds a reference to the live board.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
LayoutRow = str
Coordinates = tuple[int, int]


@dataclass
class GameModel:
    """Plain data copy of the board (as layout rows) and the selected peg."""

    board: list[LayoutRow]
    selection: Optional[Coordinates]
