"""Draws many textured quads in one pass from per-instance data."""

from __future__ import annotations

from typing import Any, Dict, Sequence, Tuple

import pygame

from gemswap.assets import Texture
from gemswap.matrix import Mat4
from gemswap.render import Renderer2D
from gemswap.vectors import Vec2


class BatchRenderer(Renderer2D):
    """Draws every instance of an instancing batch onto one surface."""

    def __init__(self, surface: pygame.Surface, projection: Mat4, view: Mat4) -> None:
        super().__init__(projection, view)
        self.surface = surface
        width, height = surface.get_size()
        self.viewport = Vec2(float(width), float(height))
        # Scaled copies keyed by texture identity and pixel size.
        self._scaled: Dict[Tuple[int, Tuple[int, int]], Tuple[pygame.Surface, pygame.Surface]] = {}

    def _scaled_image(self, texture: Texture, size: Tuple[int, int]) -> pygame.Surface:
        key = (id(texture), size)
        cached = self._scaled.get(key)
        if cached is not None and cached[0] is texture.surface:
            return cached[1]
        image = pygame.transform.scale(texture.surface, size)
        self._scaled[key] = (texture.surface, image)
        return image

    def render(self, data: Any, textures: Sequence[Texture]) -> int:
        """Draw each instance in order; returns how many quads were drawn.

        ``data`` holds parallel ``translations``, ``scales`` and
        ``tex_indices``; each index selects a texture from ``textures``.
        """
        translations = data.translations
        scales = data.scales
        tex_indices = data.tex_indices
        if not len(translations) == len(scales) == len(tex_indices):
            raise ValueError("instancing data lists must all have the same length")
        if not translations:
            return 0

        drawn = 0
        for translation, scale, tex_index in zip(translations, scales, tex_indices):
            if not 0 <= tex_index < len(textures):
                raise IndexError(f"texture index {tex_index} out of range")
            rect = self._screen_rect(translation, scale)
            if rect.w <= 0 or rect.h <= 0:
                continue
            image = self._scaled_image(textures[tex_index], rect.size)
            self.surface.blit(image, rect.topleft)
            drawn += 1
        return drawn