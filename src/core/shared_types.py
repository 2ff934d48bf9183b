"""
Type definitions used across layers
"""

from enum import StrEnum


class MoveResult(StrEnum):
    """Classification of a single gesture on the board. Every click maps to exactly one of these."""

    SELECT = "select"
    MOVE_SUCCESS = "move success"
    NO_ACTION = "no action"
