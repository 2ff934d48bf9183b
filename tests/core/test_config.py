"""Unit tests for src/core/config.py"""

from unittest.mock import patch

from src.core.config import (
    BOARD_DIMENSIONS,
    INITIAL_LAYOUT,
    LOG_FORMAT,
    configure_logging,
)


def test_initial_layout_matches_dimensions() -> None:
    assert len(INITIAL_LAYOUT) == BOARD_DIMENSIONS[0]
    assert all(len(row) == BOARD_DIMENSIONS[1] for row in INITIAL_LAYOUT)


def test_initial_layout_single_hole() -> None:
    """Exactly one empty hole, in the center"""
    assert "".join(INITIAL_LAYOUT).count("0") == 1
    assert INITIAL_LAYOUT[3][3] == "0"


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        configure_logging("DEBUG")
    basic_config.assert_called_once_with(level="DEBUG", format=LOG_FORMAT)
