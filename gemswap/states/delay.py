"""A state that waits for a while before handing over to another."""

from __future__ import annotations

from typing import Any, Optional

from gemswap.shared import GameState
from gemswap.states.base import State


class DelayState(State):
    """Waits ``delay`` seconds, then moves on to the configured state."""

    def __init__(self, controller: Any) -> None:
        super().__init__(controller)
        self.elapsed = 0.0
        self.delay = 1.0
        self._next: Optional[State] = None

    def configure(self, delay: float, next_state: Optional[State]) -> None:
        self.delay = delay
        self._next = next_state

    @property
    def kind(self) -> GameState:
        return GameState.DELAY

    def execute(self) -> None:
        """Start counting the delay from now."""
        self.elapsed = 0.0

    def is_done(self) -> bool:
        return self.elapsed >= self.delay

    def next_state(self) -> Optional[State]:
        return self._next

    def update(self, dt: float) -> None:
        self.elapsed += dt