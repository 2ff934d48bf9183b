"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import MoveResult

LayoutRow = str
SnapshotLabel = str


# --- REQUEST MODELS ---
class CellClickRequest(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if value < 0:
            raise InvalidRequestError(
                f"Cannot interpret coordinate: {value!r}. Must be zero or positive."
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    board: list[LayoutRow]
    selection: Optional[tuple[int, int]]
    result: Optional[MoveResult]
    game_started: bool
    game_over: bool
    is_win: bool
    pegs_remaining: int
    message: str
    elapsed: str
    history: list[SnapshotLabel]
