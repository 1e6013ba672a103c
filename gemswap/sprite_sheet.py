"""An entity drawn from an animated sprite sheet."""

from __future__ import annotations

from typing import Any

from gemswap.animation import Animation
from gemswap.entity import GameEntity
from gemswap.vectors import Vec2


class SpriteSheetEntity(GameEntity, Animation):
    """Plays through part of a sprite sheet once per cycle."""

    def __init__(self) -> None:
        super().__init__()
        self.sliced_size = Vec2()

    def setup(
        self,
        position: Vec2,
        size: Vec2,
        sprite: Any,
        renderer: Any,
        sheet_rows: int,
        sheet_cols: int,
        rows: int,
        cols: int,
        frame_delay: float,
    ) -> None:
        """Place the entity and use the top-left ``rows`` x ``cols`` of the sheet."""
        super().setup(renderer, sprite, position, size)
        sheet = sprite.size
        self.configure(
            cols,
            rows,
            frame_delay,
            Vec2(sheet.x / (cols + 1), sheet.y / (rows + 1)),
        )
        cell_width = sheet.x / sheet_cols
        cell_height = sheet.y / sheet_rows
        self.sliced_size = Vec2(cell_width * cols, cell_height * rows)

    def is_done(self) -> bool:
        return self.current_col == self.max_cols and self.current_row == self.max_rows

    def update(self, dt: float) -> None:
        super().update(dt)

    def render(self) -> None:
        self.renderer.draw_image_region(
            self.sprite,
            Vec2(self.current_col, self.current_row) * self.frame_size,
            self.frame_size,
            self.position,
            self.size,
            self.sliced_size,
        )