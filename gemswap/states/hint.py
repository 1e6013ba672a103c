"""Waits for the player to idle, then points out a swap that makes a match."""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from gemswap.settings import COUNT_FOR_MATCH, GRID_COLS, GRID_ROWS, HINT_WAIT_TIME, get_index
from gemswap.shared import GameState, GemSlot, SlotState
from gemswap.states.base import State

logger = logging.getLogger(__name__)

_REACH = 2


def _has_run(line: Sequence[Optional[GemSlot]], slot: GemSlot) -> bool:
    count = 0
    for other in line:
        if (
            other is not None
            and other.state is not SlotState.BLOCKED
            and other.gem_type == slot.gem_type
        ):
            count += 1
            if count >= COUNT_FOR_MATCH:
                return True
        else:
            count = 0
    return False


def forms_match(slots: Sequence[GemSlot], slot: GemSlot) -> bool:
    """Whether ``slot`` is part of a line of equal gems within two cells of it."""
    column: List[Optional[GemSlot]] = [
        slots[get_index(row, slot.col)] if 0 <= row < GRID_ROWS else None
        for row in range(slot.row - _REACH, slot.row + _REACH + 1)
    ]
    row_line: List[Optional[GemSlot]] = [
        slots[get_index(slot.row, col)] if 0 <= col < GRID_COLS else None
        for col in range(slot.col - _REACH, slot.col + _REACH + 1)
    ]
    return _has_run(column, slot) or _has_run(row_line, slot)


def _neighbours(slot: GemSlot) -> Iterator[Tuple[int, int]]:
    if slot.row > 0:
        yield slot.row - 1, slot.col
    if slot.row < GRID_ROWS - 1:
        yield slot.row + 1, slot.col
    if slot.col > 0:
        yield slot.row, slot.col - 1
    if slot.col < GRID_COLS - 1:
        yield slot.row, slot.col + 1


def _swap_makes_match(slots: Sequence[GemSlot], one: GemSlot, two: GemSlot) -> bool:
    one.gem_type, two.gem_type = two.gem_type, one.gem_type
    try:
        return forms_match(slots, one) or forms_match(slots, two)
    finally:
        one.gem_type, two.gem_type = two.gem_type, one.gem_type


def _find_swap(slots: Sequence[GemSlot]) -> Optional[Tuple[GemSlot, GemSlot]]:
    """The first swap that makes a match, searching from the last slot backwards."""
    for slot in reversed(slots):
        if slot.state is SlotState.BLOCKED:
            continue
        for row, col in _neighbours(slot):
            other = slots[get_index(row, col)]
            if other.state is SlotState.BLOCKED:
                continue
            if _swap_makes_match(slots, slot, other):
                return slot, other
    return None


class HintState(State):
    """After ``HINT_WAIT_TIME`` seconds, shows one swap that would make a match."""

    def __init__(self, controller: Any) -> None:
        super().__init__(controller)
        self.hint_wait_time = HINT_WAIT_TIME
        self.elapsed = 0.0
        self.showing_hint = False
        self.hint_pair: Optional[Tuple[GemSlot, GemSlot]] = None
        logger.debug("hint is created")

    @property
    def kind(self) -> GameState:
        return GameState.HINTING

    def execute(self) -> None:
        """Nothing to start; the wait begins on creation."""

    def is_done(self) -> bool:
        return True

    def next_state(self) -> None:
        return None

    def update(self, dt: float) -> None:
        if self.showing_hint:
            return
        self.elapsed += dt
        if self.elapsed > self.hint_wait_time:
            self.showing_hint = True
            logger.debug("finding slots for hint")
            self._find_slots()

    def _find_slots(self) -> None:
        self.hint_pair = _find_swap(self.slots)
        if self.hint_pair is not None:
            logger.debug("slots found")
            self.controller.show_hint_for_slots(*self.hint_pair)

    def close(self) -> None:
        """Take the hint off the board."""
        self.controller.hide_hint()