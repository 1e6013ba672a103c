"""Drops gems into every free slot until the board is full."""

from __future__ import annotations

from typing import Any, List, Optional

from gemswap.entity import TweenType
from gemswap.gem import GemEntity
from gemswap.settings import GEM_FALL_ANIM_TIME, GRID_COLS, GRID_ROWS, get_index
from gemswap.shared import GameState, GemSlot, SlotState
from gemswap.sound import SoundController, get_sound_controller
from gemswap.states.base import State
from gemswap.states.match_resolution import MatchResolutionState
from gemswap.vectors import Vec2

_SPAWN_HEIGHT = 100.0


class FillEmptySlotsState(State):
    """Lets hanging gems fall and spawns new ones at the top until nothing is free."""

    def __init__(self, controller: Any, sound: Optional[SoundController] = None) -> None:
        super().__init__(controller)
        self.sound = get_sound_controller() if sound is None else sound
        self.sound_interval = 0.1
        self.sfx_elapsed = 0.0
        self._animating: List[GemEntity] = []
        self._removed: List[GemEntity] = []
        self._spawned: List[GemEntity] = []
        self._entry_slots: List[GemSlot] = []

    @property
    def kind(self) -> GameState:
        return GameState.FILLING_UP_EMPTY_SLOTS

    def is_done(self) -> bool:
        return not self._found_free_slot() and not self._animating

    def next_state(self) -> State:
        return MatchResolutionState(self.controller, self.sound)

    def _slot(self, row: int, col: int) -> GemSlot:
        return self.slots[get_index(row, col)]

    def _determine_entry_slots(self) -> None:
        self._entry_slots = [
            slot
            for slot in (self._slot(0, col) for col in range(GRID_COLS))
            if slot.state is SlotState.FREE
        ]

    def _slot_to_move_to(self, gem: GemEntity) -> Optional[GemSlot]:
        """The slot a gem falls into next: straight down, or diagonally past a block."""
        row, col = gem.slot_data.row, gem.slot_data.col
        if row >= GRID_ROWS - 1:
            return None
        below = self._slot(row + 1, col)
        if below.state is SlotState.FREE:
            return below
        if (
            col > 0
            and self._slot(row, col - 1).state is SlotState.BLOCKED
            and self._slot(row + 1, col - 1).state is SlotState.FREE
        ):
            return self._slot(row + 1, col - 1)
        if (
            col < GRID_COLS - 1
            and self._slot(row, col + 1).state is SlotState.BLOCKED
            and self._slot(row + 1, col + 1).state is SlotState.FREE
        ):
            return self._slot(row + 1, col + 1)
        return None

    @staticmethod
    def _move(gem: GemEntity, target: GemSlot) -> None:
        gem.change_pos(target.row, target.col)
        gem.add_tween(target.center, GEM_FALL_ANIM_TIME, TweenType.LINEAR)

    def _push_hanging_gems_down(self) -> None:
        for col in range(GRID_COLS):
            for row in range(GRID_ROWS - 2, -1, -1):
                slot = self._slot(row, col)
                if slot.state is not SlotState.OCCUPIED:
                    continue
                gem = self.controller.gem_for_slot(slot)
                if gem is None:
                    continue
                target = self._slot_to_move_to(gem)
                if target is None:
                    continue
                slot.state = SlotState.FREE
                self._move(gem, target)
                self._animating.append(gem)

    def _spawn_gem_to_fill_slot(self, slot: GemSlot, as_spawned: bool = False) -> GemEntity:
        gem = self.controller.create_orphan_gem(True)
        gem.position = slot.center - gem.size * 0.5 - Vec2(0.0, _SPAWN_HEIGHT)
        self._move(gem, slot)
        if not as_spawned:
            self._animating.append(gem)
        return gem

    def execute(self) -> None:
        self._push_hanging_gems_down()
        self._determine_entry_slots()
        for slot in self._entry_slots:
            self._spawn_gem_to_fill_slot(slot)

    def _on_tween_finished(self, gem: GemEntity) -> bool:
        """Move the gem on or settle it; returns True when it has settled."""
        slot = self.slots[gem.slot_data.index]
        target = self._slot_to_move_to(gem)
        if target is not None:
            slot.state = SlotState.FREE
            self._move(gem, target)
            if any(entry.index == slot.index for entry in self._entry_slots):
                self._spawned.append(self._spawn_gem_to_fill_slot(slot, True))
            return False

        slot.gem_type = gem.gem_type
        slot.state = SlotState.OCCUPIED
        self._removed.append(gem)
        if self.sfx_elapsed > self.sound_interval:
            self.sound.play_gem_settle(1.0)
            self.sfx_elapsed = 0.0
        return True

    def update(self, dt: float) -> None:
        self.sfx_elapsed += dt
        for gem in list(self._animating):
            if not gem.tweening:
                self._on_tween_finished(gem)
        for gem in self._removed:
            self._animating.remove(gem)
        self._animating.extend(self._spawned)

        if self._found_free_slot() and not self._animating:
            self.execute()

        self._spawned.clear()
        self._removed.clear()

    def _found_free_slot(self) -> bool:
        return any(slot.state is SlotState.FREE for slot in self.slots)