"""
Configuration constants and logging setup.

Everything is memory-resident, so the only things to configure are the fixed starting layout,
the texts shown at the end of a game, and how verbose the logs are.
"""

import logging
import os

# The classic English cross. '-' is outside the board, '1' holds a peg, '0' is an empty hole.
INITIAL_LAYOUT: tuple[str, ...] = (
    "--111--",
    "--111--",
    "1111111",
    "1110111",
    "1111111",
    "--111--",
    "--111--",
)

# Only one board shape is supported. (rows, columns)
BOARD_DIMENSIONS = (7, 7)

# The adapter refreshes the elapsed-time display at this rate
TIMER_INTERVAL_SECONDS = 1.0

WIN_MESSAGE = "Perfect! You won!"
GAME_OVER_MESSAGE = "Game Over. {pegs_remaining} pegs left."

LOG_LEVEL = os.environ.get("PEG_SOLITAIRE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Called once by whatever runs the UI loop. Library modules only create their own loggers."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
