"""Gem entities and the board cell each one belongs to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gemswap.entity import GameEntity
from gemswap.settings import get_index
from gemswap.shared import GemType
from gemswap.vectors import Vec2


@dataclass(frozen=True)
class SlotData:
    """Grid cell a gem is assigned to; -1 means not on the board."""

    row: int = -1
    col: int = -1
    index: int = -1


class GemEntity(GameEntity):
    """A coloured gem that belongs to one board slot."""

    def __init__(self) -> None:
        super().__init__()
        self.slot_data = SlotData()
        self.gem_type = GemType.COLOR_1
        self.visible = True

    def setup(
        self,
        gem_type: GemType,
        renderer: Any,
        sprite: Any,
        position: Vec2,
        size: Vec2,
    ) -> None:
        super().setup(renderer, sprite, position, size)
        self.gem_type = gem_type
        self.visible = True

    def reset(self) -> None:
        super().reset()
        self.visible = True

    def change_pos(self, row: int, col: int) -> None:
        """Assign the gem to the cell at ``row``, ``col``."""
        self.slot_data = SlotData(row, col, get_index(row, col))