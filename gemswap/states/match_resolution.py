"""Finds lines of three or more equal gems and clears them with a burst."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

from gemswap.settings import COUNT_FOR_MATCH
from gemswap.shared import GameState, GemSlot, GemType, SlotState
from gemswap.sound import SoundController, get_sound_controller
from gemswap.states.base import State


def _runs(line: Iterable[GemSlot]) -> Iterator[List[GemSlot]]:
    """Runs of at least ``COUNT_FOR_MATCH`` equal gems along one line.

    A blocked slot ends a run but does not forget the colour being followed.
    """
    current: List[GemSlot] = []
    gem_type = GemType.COLOR_1
    for slot in line:
        if slot.state is SlotState.BLOCKED:
            if len(current) >= COUNT_FOR_MATCH:
                yield current
            current = []
            continue
        if slot.gem_type == gem_type:
            current.append(slot)
        else:
            if len(current) >= COUNT_FOR_MATCH:
                yield current
            gem_type = slot.gem_type
            current = [slot]
    if len(current) >= COUNT_FOR_MATCH:
        yield current


class MatchResolutionState(State):
    """Clears every match on the board, or hands over to input if there is none."""

    def __init__(self, controller: Any, sound: Optional[SoundController] = None) -> None:
        super().__init__(controller)
        self.sound = get_sound_controller() if sound is None else sound
        self.direct_to_input = False
        self.matched: List[GemSlot] = []

    @property
    def kind(self) -> GameState:
        return GameState.RESOLVING_MATCHES

    def is_done(self) -> bool:
        return not self.controller.effects_active

    def next_state(self) -> State:
        if self.direct_to_input:
            from gemswap.states.mouse_input import MouseInputState

            return MouseInputState(self.controller, self.sound)
        from gemswap.states.fill import FillEmptySlotsState

        return FillEmptySlotsState(self.controller, self.sound)

    def _rows(self) -> Iterator[List[GemSlot]]:
        cols = self.controller.cols
        for start in range(0, len(self.slots), cols):
            yield self.slots[start:start + cols]

    def _columns(self) -> Iterator[List[GemSlot]]:
        cols = self.controller.cols
        for col in range(cols):
            yield self.slots[col::cols]

    def _find_matches(self) -> List[GemSlot]:
        matched: List[GemSlot] = []
        for row in self._rows():
            for run in _runs(row):
                matched.extend(run)
        seen = {slot.index for slot in matched}
        for column in self._columns():
            for run in _runs(column):
                for slot in run:
                    if slot.index not in seen:
                        seen.add(slot.index)
                        matched.append(slot)
        return matched

    def execute(self) -> None:
        self.matched = self._find_matches()
        if self.matched:
            self._remove_gems_with_effects(self.matched)
        else:
            self.direct_to_input = True

    def update(self, dt: float) -> None:
        """Nothing to advance here; the controller plays the burst effects."""

    def _remove_gems_with_effects(self, slots: List[GemSlot]) -> None:
        self.sound.play_match(1.0)
        for slot in slots:
            slot.state = SlotState.FREE
            self.controller.create_burst_effect(slot.center)
            gem = self.controller.gem_for_slot(slot)
            if gem is not None:
                gem.set_active(False)