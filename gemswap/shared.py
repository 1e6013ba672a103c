"""Enumerations and the slot record shared by the gameplay modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from gemswap.vectors import Vec2


class GemType(IntEnum):
    COLOR_1 = 0
    COLOR_2 = 1
    COLOR_3 = 2
    COLOR_4 = 3
    COLOR_5 = 4
    MAX = 5


class GameState(IntEnum):
    FILLING_UP_EMPTY_SLOTS = 0
    MOUSE_INPUT_STATE = 1
    RESOLVING_MATCHES = 2
    DELAY = 3
    HINTING = 4


class SlotState(IntEnum):
    BLOCKED = 0
    OCCUPIED = 1
    FREE = 2


@dataclass(eq=False)
class GemSlot:
    """One cell of the board: where it is, what it holds and how it is drawn."""

    row: int = 0
    col: int = 0
    index: int = 0
    state: SlotState = SlotState.FREE
    gem_type: GemType = GemType.COLOR_1
    position: Vec2 = field(default_factory=Vec2)
    center: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)
    tex_index: int = 0