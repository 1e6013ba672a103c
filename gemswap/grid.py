"""The board: slots, gems, burst effects, hints and their drawing data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, List, Optional

from gemswap.assets import AssetManager, get_asset_manager
from gemswap.entity import GameEntity
from gemswap.gem import GemEntity
from gemswap.pool import EntityPool
from gemswap.randomness import RandomSource, get_random
from gemswap.settings import (
    BLOCKED_CELL,
    BOARDS,
    GEM_HEIGHT,
    GEM_WIDTH,
    GRID_COLS,
    GRID_ROWS,
    HEIGHT,
    SLOT_HEIGHT,
    SLOT_WIDTH,
    WIDTH,
    get_index,
)
from gemswap.shared import GemSlot, GemType, SlotState
from gemswap.sprite_sheet import SpriteSheetEntity
from gemswap.vectors import Vec2

GEM_POOL_SIZE = 200
BURST_POOL_SIZE = 50
HINT_MARGIN = 15.0


class TexIndex(IntEnum):
    """Position of each texture in the controller's texture list."""

    GEM_TYPE_0 = 0
    GEM_TYPE_1 = 1
    GEM_TYPE_2 = 2
    GEM_TYPE_3 = 3
    GEM_TYPE_4 = 4
    SLOT = 5
    BLOCK = 6
    BURST = 7
    SELECTION = 8
    HINT = 9


# Asset names in TexIndex order.
TEXTURE_NAMES = (
    "gem1",
    "gem2",
    "gem3",
    "gem4",
    "gem5",
    "slot",
    "block",
    "burst",
    "selection",
    "hint",
)


@dataclass
class InstancingData:
    """Per-instance data for one batched draw: where, how big, which texture."""

    translations: List[Vec2] = field(default_factory=list)
    scales: List[Vec2] = field(default_factory=list)
    tex_indices: List[int] = field(default_factory=list)

    def add(self, translation: Vec2, scale: Vec2, tex_index: int) -> None:
        self.translations.append(translation)
        self.scales.append(scale)
        self.tex_indices.append(tex_index)

    def copy(self) -> "InstancingData":
        return InstancingData(
            list(self.translations), list(self.scales), list(self.tex_indices)
        )

    def __len__(self) -> int:
        return len(self.translations)


def _point_inside(position: Vec2, size: Vec2, point: Vec2) -> bool:
    return (
        position.x < point.x < position.x + size.x
        and position.y < point.y < position.y + size.y
    )


class GridController:
    """Owns the board slots and the gems, effects and hint drawn over them."""

    def __init__(
        self,
        sprite_renderer: Any,
        text_renderer: Any = None,
        assets: Optional[AssetManager] = None,
        batch_renderer: Any = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.sprite_renderer = sprite_renderer
        self.text_renderer = text_renderer
        self.batch_renderer = batch_renderer
        self._rng = get_random() if rng is None else rng
        manager = get_asset_manager() if assets is None else assets
        self.textures = [manager.texture(name) for name in TEXTURE_NAMES]

        self.rows = GRID_ROWS
        self.cols = GRID_COLS
        self.spacing = Vec2()
        self.position = Vec2()
        self._slots: List[GemSlot] = self._setup_slots()

        # Slots never change in number, so their instancing data is built once.
        self.instancing = InstancingData()
        for slot in self._slots:
            self.instancing.add(slot.position, slot.size, slot.tex_index)

        self._gem_pool: EntityPool[GemEntity] = EntityPool(GemEntity, GEM_POOL_SIZE)
        self._burst_pool: EntityPool[SpriteSheetEntity] = EntityPool(
            SpriteSheetEntity, BURST_POOL_SIZE
        )
        self._gems: List[GemEntity] = []
        self._effects: List[SpriteSheetEntity] = []

        self.hint_entity = GameEntity()
        self.hint_entity.setup(
            self.sprite_renderer,
            self.textures[TexIndex.HINT],
            Vec2(),
            Vec2(SLOT_WIDTH * 2 + 30, SLOT_HEIGHT + 30),
        )
        self.hint_angle = 0.0
        self.showing_hint = False

    def _setup_slots(self) -> List[GemSlot]:
        board = BOARDS[0]
        board_size = Vec2(
            (self.cols - 2) * self.spacing.x + SLOT_WIDTH * self.cols,
            (self.rows - 2) * self.spacing.y + SLOT_HEIGHT * self.rows,
        )
        self.position = Vec2(
            WIDTH / 2.0 - board_size.x / 2.0, HEIGHT / 2.0 - board_size.y / 2.0
        )
        size = Vec2(SLOT_WIDTH, SLOT_HEIGHT)
        slots = []
        for row in range(self.rows):
            for col in range(self.cols):
                index = get_index(row, col)
                blocked = board[index] == BLOCKED_CELL
                position = Vec2(
                    self.position.x + col * SLOT_WIDTH + self.spacing.x,
                    self.position.y + self.spacing.y + row * SLOT_HEIGHT,
                )
                slots.append(
                    GemSlot(
                        row=row,
                        col=col,
                        index=index,
                        state=SlotState.BLOCKED if blocked else SlotState.FREE,
                        position=position,
                        center=position + size * 0.5,
                        size=size,
                        tex_index=TexIndex.BLOCK if blocked else TexIndex.SLOT,
                    )
                )
        return slots

    @property
    def slots(self) -> List[GemSlot]:
        """All board slots in row-major order."""
        return self._slots

    @property
    def gems(self) -> List[GemEntity]:
        """Gems currently on the board or falling into it."""
        return self._gems

    def create_orphan_gem(self, include_in_container: bool = False) -> GemEntity:
        """Take a gem of a random colour from the pool, not yet in any slot."""
        gem_index = self._rng.integer(0, int(GemType.COLOR_5))
        gem = self._gem_pool.create()
        gem.change_pos(-1, -1)
        gem.setup(
            GemType(gem_index),
            self.sprite_renderer,
            self.textures[gem_index],
            Vec2(),
            Vec2(GEM_WIDTH, GEM_HEIGHT),
        )
        gem.tex_index = gem_index
        if include_in_container:
            self._gems.append(gem)
        return gem

    def create_burst_effect(self, center: Vec2) -> None:
        """Start a burst animation centred on ``center``."""
        size = Vec2(SLOT_WIDTH, SLOT_HEIGHT) * 2.0
        effect = self._burst_pool.create()
        effect.setup(
            center - size * 0.5,
            size,
            self.textures[TexIndex.BURST],
            self.sprite_renderer,
            4,
            7,
            4,
            7,
            0.01,
        )
        self._effects.append(effect)

    @property
    def effects_active(self) -> bool:
        return bool(self._effects)

    @property
    def gems_animating(self) -> bool:
        return any(gem.tweening for gem in self._gems)

    def slot_selected(self, slot: GemSlot) -> None:
        slot.tex_index = TexIndex.SELECTION
        self.instancing.tex_indices[slot.index] = slot.tex_index

    def slot_deselected(self, slot: GemSlot) -> None:
        slot.tex_index = TexIndex.SLOT
        self.instancing.tex_indices[slot.index] = slot.tex_index

    def show_hint_for_slots(self, slot0: GemSlot, slot1: GemSlot) -> None:
        """Frame two neighbouring slots with the hint marker."""
        self.showing_hint = True
        position = Vec2()
        size = self.hint_entity.size
        vertical_offset = size * Vec2(0.27, 0.5)
        if slot0.row > slot1.row:
            self.hint_angle = 90.0
            position = slot0.position - vertical_offset
        elif slot1.row > slot0.row:
            self.hint_angle = 90.0
            position = slot1.position - vertical_offset
        margin = Vec2(HINT_MARGIN, HINT_MARGIN)
        if slot0.col > slot1.col:
            self.hint_angle = 0.0
            position = slot1.position - margin
        elif slot1.col > slot0.col:
            self.hint_angle = 0.0
            position = slot0.position - margin
        self.hint_entity.position = position
        self.hint_entity.rotation = self.hint_angle

    def hide_hint(self) -> None:
        self.showing_hint = False

    def gem_for_slot(self, slot: GemSlot) -> Optional[GemEntity]:
        """The gem assigned to ``slot``, if any."""
        return next(
            (gem for gem in self._gems if gem.slot_data.index == slot.index), None
        )

    def _slot_at(self, position: Vec2) -> Optional[GemSlot]:
        return next(
            (s for s in self._slots if _point_inside(s.position, s.size, position)),
            None,
        )

    def on_mouse_press(self, position: Vec2) -> Optional[GemSlot]:
        """The slot under a mouse press, if any."""
        return self._slot_at(position)

    def on_mouse_release(self, position: Vec2) -> Optional[GemSlot]:
        """The slot under a mouse release, if any."""
        return self._slot_at(position)

    def update(self, dt: float) -> None:
        """Advance tweens and effects; drop inactive gems and finished effects."""
        for gem in list(self._gems):
            gem.tick(dt)
        self._gems[:] = [gem for gem in self._gems if gem.active]

        for effect in self._effects:
            effect.update(dt)
            if effect.is_done():
                effect.set_active(False)
        self._effects[:] = [effect for effect in self._effects if effect.active]

    def render(self) -> None:
        """Draw slots and visible gems in one batch, then effects and the hint."""
        frame = self.instancing.copy()
        for gem in self._gems:
            if gem.visible:
                frame.add(gem.position, gem.size, gem.tex_index)

        if self.batch_renderer is not None:
            self.batch_renderer.render(frame, self.textures)
        else:
            for translation, scale, tex_index in zip(
                frame.translations, frame.scales, frame.tex_indices
            ):
                self.sprite_renderer.draw_image(
                    self.textures[tex_index], translation, scale, 0.0
                )

        for effect in self._effects:
            effect.render()

        if self.showing_hint:
            self.hint_entity.render()