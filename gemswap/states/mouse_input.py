"""Turns clicks and drags into gem swaps."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from gemswap.entity import TweenType
from gemswap.gem import GemEntity
from gemswap.settings import DRAG_THRESHOLD, GRID_COLS, GRID_ROWS, get_index
from gemswap.shared import GameState, GemSlot, SlotState
from gemswap.sound import SoundController, get_sound_controller
from gemswap.states.base import State
from gemswap.states.hint import HintState, forms_match
from gemswap.states.match_resolution import MatchResolutionState
from gemswap.vectors import Vec2

logger = logging.getLogger(__name__)

SWAP_TIME = 0.3
RETURN_TIME = 0.1
_ALIGNMENT = 0.8
_DIRECTIONS = (
    (Vec2(1.0, 0.0), 0, 1),
    (Vec2(-1.0, 0.0), 0, -1),
    (Vec2(0.0, 1.0), 1, 0),
    (Vec2(0.0, -1.0), -1, 0),
)


def _point_inside_rect(position: Vec2, size: Vec2, point: Vec2) -> bool:
    return (
        position.x < point.x < position.x + size.x
        and position.y < point.y < position.y + size.y
    )


class MouseInputState(State):
    """Waits for the player to swap two neighbouring gems by dragging or clicking."""

    def __init__(self, controller: Any, sound: Optional[SoundController] = None) -> None:
        super().__init__(controller)
        self.sound = get_sound_controller() if sound is None else sound
        self.last_cursor_pos = Vec2()
        self.selected_slot: Optional[GemSlot] = None
        self.selected_slots: List[GemSlot] = []
        self.hint_state: Optional[HintState] = None
        self.swap_done = False
        self.swap_in_progress = False
        self._tween_finish_count = 0

    @property
    def kind(self) -> GameState:
        return GameState.MOUSE_INPUT_STATE

    def execute(self) -> None:
        self.hint_state = HintState(self.controller)

    def update(self, dt: float) -> None:
        if self.hint_state is not None:
            self.hint_state.update(dt)

    def is_done(self) -> bool:
        return (
            not self.swap_in_progress
            and self.swap_done
            and not self.controller.gems_animating
        )

    def next_state(self) -> State:
        if self.hint_state is not None:
            self.hint_state.close()
            self.hint_state = None
        return MatchResolutionState(self.controller, self.sound)

    def on_mouse_down(self, position: Vec2) -> None:
        if self.swap_in_progress:
            return
        self.last_cursor_pos = position
        self.slots = list(self.controller.slots)
        for slot in self.slots:
            if slot.state is SlotState.BLOCKED:
                continue
            if _point_inside_rect(slot.position, slot.size, position):
                self.selected_slot = slot
                break

    def on_mouse_up(self, position: Vec2) -> None:
        if self.swap_in_progress:
            return
        if self.selected_slot is None:
            logger.debug("cannot swap: no slot selected")
            return
        delta = position - self.last_cursor_pos
        if delta.length() > DRAG_THRESHOLD:
            self._drag_swap(self.selected_slot, delta.normalize())
        else:
            self._click_select(self.selected_slot)

    def _drag_swap(self, selected: GemSlot, direction: Vec2) -> None:
        row, col = selected.row, selected.col
        for axis, d_row, d_col in _DIRECTIONS:
            if direction.dot(axis) > _ALIGNMENT:
                row += d_row
                col += d_col
                break
        if not (0 <= row < GRID_ROWS and 0 <= col < GRID_COLS):
            logger.debug("cannot swap: the other gem is off the board")
            return
        second = self.slots[get_index(row, col)]
        if second.state is SlotState.BLOCKED:
            return
        if second.state is SlotState.FREE:
            raise RuntimeError(f"slot {second.row},{second.col} has no gem to swap with")
        self._swap_gems(selected, second)

    def _click_select(self, selected: GemSlot) -> None:
        self.controller.slot_selected(selected)
        self.selected_slots.append(selected)
        if len(self.selected_slots) != 2:
            return
        first, second = self.selected_slots
        row_diff = abs(first.row - second.row)
        col_diff = abs(first.col - second.col)
        adjacent = (row_diff == 0 or col_diff == 0) and col_diff < 2 and row_diff < 2
        if adjacent:
            self._swap_gems(first, second)
        else:
            self.controller.slot_deselected(first)
            self.controller.slot_deselected(second)
        self.selected_slots.clear()

    def _swap_gems(self, one: GemSlot, two: GemSlot) -> None:
        gem_one = self.controller.gem_for_slot(one)
        gem_two = self.controller.gem_for_slot(two)
        if gem_one is None or gem_two is None:
            raise RuntimeError("both slots of a swap must hold a gem")

        self.swap_in_progress = True
        one.gem_type, two.gem_type = two.gem_type, one.gem_type

        if forms_match(self.slots, one) or forms_match(self.slots, two):
            self.swap_done = True
            gem_one.change_pos(two.row, two.col)
            gem_two.change_pos(one.row, one.col)
            gem_one.add_tween(two.center, SWAP_TIME, TweenType.LINEAR, self.on_swap_anim_finished)
            gem_two.add_tween(one.center, SWAP_TIME, TweenType.LINEAR, self.on_swap_anim_finished)
        else:
            one.gem_type, two.gem_type = two.gem_type, one.gem_type
            gem_one.add_tween(two.center, SWAP_TIME, TweenType.LINEAR)
            gem_two.add_tween(one.center, SWAP_TIME, TweenType.LINEAR)
            gem_one.add_tween(one.center, RETURN_TIME, TweenType.LINEAR, self.on_swap_anim_finished)
            gem_two.add_tween(two.center, RETURN_TIME, TweenType.LINEAR, self.on_swap_anim_finished)

    def on_swap_anim_finished(self, entity: Any) -> None:
        """Called as each swapped gem lands; the second landing ends the swap."""
        if not isinstance(entity, GemEntity):
            raise TypeError(f"expected a gem, got {type(entity).__name__}")
        self._tween_finish_count += 1
        if self._tween_finish_count >= 2:
            self.swap_in_progress = False
            self._tween_finish_count = 0
            self.sound.play_swap(1.0)
        data = entity.slot_data
        self.controller.slot_deselected(self.slots[get_index(data.row, data.col)])