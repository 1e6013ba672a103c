"""The interface every game state implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from gemswap.shared import GameState


class State(ABC):
    """One phase of play, driven by the game loop until it is done."""

    def __init__(self, controller: Any) -> None:
        self.controller = controller
        self.slots = list(controller.slots)
        self.gems = list(controller.gems)

    @property
    @abstractmethod
    def kind(self) -> GameState:
        """Which phase this state is."""

    @abstractmethod
    def execute(self) -> None:
        """Start the state's work; called once when it becomes current."""

    @abstractmethod
    def is_done(self) -> bool:
        """Whether the game should move on to ``next_state``."""

    @abstractmethod
    def next_state(self) -> Optional["State"]:
        """The state that follows this one."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""