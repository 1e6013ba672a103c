"""Fixed game settings: window size, grid dimensions, timings and board layouts."""

from __future__ import annotations

from enum import IntEnum

WIDTH = 1024
HEIGHT = 768
MAX_KEYS = 4
GRID_ROWS = 8
GRID_COLS = 8
COUNT_FOR_MATCH = 3

GEM_WIDTH = 65
GEM_HEIGHT = 65
SLOT_WIDTH = 80
SLOT_HEIGHT = 80
BLOCK_WIDTH = 100
BLOCK_HEIGHT = 100
DRAG_THRESHOLD = 40

# Delays, in seconds.
STATE_SWITCH_DELAY_TIME = 0.0
GEM_FALL_ANIM_TIME = 0.2
HINT_WAIT_TIME = 4.0

BLOCKED_CELL = "x"
OPEN_CELL = "o"

_SHAPED_BOARD = (
    "xxooooxx"
    "xxooooxx"
    "xooooook"
)

# Each board is a row-major 8x8 layout: 'x' is a blocked cell, 'o' is playable.
BOARDS: tuple[str, ...] = (
    "xxooooxx"
    "xxooooxx"
    "xoooooox"
    "oooooooo"
    "oooooooo"
    "xooxxoox"
    "xooxxoox"
    "xooxxoox",
    "o" * 64,
    "xxooooxx"
    "xxooooxx"
    "xoooooox"
    "oooooooo"
    "oooooooo"
    "xooxxoox"
    "xooxxoox"
    "xooxxoox",
)


class Key(IntEnum):
    """Directional keys the game listens for."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def get_index(row: int, col: int) -> int:
    """Return the flat index of a grid cell."""
    return row * GRID_COLS + col