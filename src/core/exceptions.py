"""
Exceptions shared by all layers.

NOTE: an illegal move is NOT an exception. The engine reports it as MoveResult.NO_ACTION.
"""


class GameError(Exception):
    """Base class, so the service / adapter can catch everything coming from the game in one go."""


class InvalidLayoutError(GameError):
    """Layout could not be turned into a Board (empty, ragged rows, unknown symbols)."""


class InvalidRequestError(GameError):
    """Request data coming in from the boundary failed validation."""


class GameStateError(GameError):
    """Operation does not fit the current state of the game (ex. restoring a snapshot of a differently shaped board)."""
