"""Renderers that draw sprites, quads and circles onto a pygame surface."""

from __future__ import annotations

from typing import Iterable, Tuple

import pygame

from gemswap.assets import Texture
from gemswap.matrix import Mat4
from gemswap.settings import HEIGHT, WIDTH
from gemswap.vectors import Vec2


def texture_region(
    src_pos: Vec2, src_dim: Vec2, sliced_size: Vec2
) -> Tuple[float, float, float, float]:
    """Map a pixel region of a sheet to normalised ``(x, y, width, height)``.

    ``sliced_size`` is the pixel extent that the range ``[0, 1]`` covers.
    """
    return (
        src_pos.x / sliced_size.x,
        src_pos.y / sliced_size.y,
        src_dim.x / sliced_size.x,
        src_dim.y / sliced_size.y,
    )


def _transform(vector: Tuple[float, ...], matrix: Mat4) -> Tuple[float, ...]:
    # Row vector times row-major matrix: translation lives in the last row.
    return tuple(sum(vector[i] * matrix[i, j] for i in range(4)) for j in range(4))


class Renderer2D:
    """Holds the projection and view matrices that place points on screen."""

    def __init__(self, projection: Mat4, view: Mat4) -> None:
        self.projection = projection
        self.view = view
        self.viewport = Vec2(float(WIDTH), float(HEIGHT))

    def update_view(self, view: Mat4) -> None:
        self.view = view

    def to_screen(self, point: Vec2) -> Vec2:
        """Pixel position of a world point in the viewport."""
        clip = _transform(
            _transform((point.x, point.y, 0.0, 1.0), self.view), self.projection
        )
        w = clip[3] or 1.0
        ndc_x, ndc_y = clip[0] / w, clip[1] / w
        return Vec2(
            (ndc_x + 1.0) / 2.0 * self.viewport.x,
            (1.0 - ndc_y) / 2.0 * self.viewport.y,
        )

    def _screen_rect(self, position: Vec2, size: Vec2) -> pygame.Rect:
        a = self.to_screen(position)
        b = self.to_screen(position + size)
        return pygame.Rect(
            round(min(a.x, b.x)),
            round(min(a.y, b.y)),
            round(abs(b.x - a.x)),
            round(abs(b.y - a.y)),
        )

    @staticmethod
    def _rgba(color: Iterable[float]) -> Tuple[int, int, int, int]:
        channels = [min(max(float(c), 0.0), 1.0) for c in color]
        if len(channels) == 3:
            channels.append(1.0)
        if len(channels) != 4:
            raise ValueError("a colour needs three or four channels")
        r, g, b, a = (round(c * 255) for c in channels)
        return (r, g, b, a)


class SpriteRenderer(Renderer2D):
    """Draws single images, image regions, quads and circles."""

    def __init__(self, surface: pygame.Surface, projection: Mat4, view: Mat4) -> None:
        super().__init__(projection, view)
        self.surface = surface
        width, height = surface.get_size()
        self.viewport = Vec2(float(width), float(height))

    def _blit_centered(self, image: pygame.Surface, rect: pygame.Rect) -> None:
        self.surface.blit(image, image.get_rect(center=rect.center))

    def draw_quad(
        self,
        position: Vec2,
        size: Vec2,
        color: Iterable[float],
        rotation_in_radians: float = 0.0,
    ) -> None:
        rect = self._screen_rect(position, size)
        if rect.w <= 0 or rect.h <= 0:
            return
        quad = pygame.Surface(rect.size, pygame.SRCALPHA)
        quad.fill(self._rgba(color))
        if rotation_in_radians:
            quad = pygame.transform.rotate(quad, -_degrees(rotation_in_radians))
        self._blit_centered(quad, rect)

    def draw_circle(self, position: Vec2, size: Vec2, color: Iterable[float]) -> None:
        """Fill the ellipse inscribed in the box at ``position``."""
        rect = self._screen_rect(position, size)
        if rect.w <= 0 or rect.h <= 0:
            return
        disc = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.ellipse(disc, self._rgba(color), disc.get_rect())
        self.surface.blit(disc, rect.topleft)

    def draw_textured_circle(self, position: Vec2, size: Vec2, texture: Texture) -> None:
        """Draw the texture clipped to the ellipse inscribed in the box."""
        rect = self._screen_rect(position, size)
        if rect.w <= 0 or rect.h <= 0:
            return
        image = pygame.Surface(rect.size, pygame.SRCALPHA)
        image.blit(pygame.transform.scale(texture.surface, rect.size), (0, 0))
        mask = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.ellipse(mask, (255, 255, 255, 255), mask.get_rect())
        image.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
        self.surface.blit(image, rect.topleft)

    def draw_image(
        self,
        texture: Texture,
        position: Vec2,
        size: Vec2,
        rotation_in_degrees: float = 0.0,
    ) -> None:
        rect = self._screen_rect(position, size)
        if rect.w <= 0 or rect.h <= 0:
            return
        image = pygame.transform.scale(texture.surface, rect.size)
        if rotation_in_degrees:
            image = pygame.transform.rotate(image, -rotation_in_degrees)
        self._blit_centered(image, rect)

    def draw_image_region(
        self,
        texture: Texture,
        src_pos: Vec2,
        src_dim: Vec2,
        position: Vec2,
        size: Vec2,
        sliced_size: Vec2,
    ) -> None:
        """Draw the part of ``texture`` at ``src_pos`` of extent ``src_dim``."""
        rect = self._screen_rect(position, size)
        if rect.w <= 0 or rect.h <= 0:
            return
        dx, dy, dw, dh = texture_region(src_pos, src_dim, sliced_size)
        tex_w, tex_h = texture.surface.get_size()
        source = pygame.Rect(
            round(dx * tex_w), round(dy * tex_h), round(dw * tex_w), round(dh * tex_h)
        ).clip(texture.surface.get_rect())
        if source.w <= 0 or source.h <= 0:
            return
        piece = pygame.transform.scale(texture.surface.subsurface(source), rect.size)
        # The region's first row lands on the quad's lower edge.
        piece = pygame.transform.flip(piece, False, True)
        self.surface.blit(piece, rect.topleft)


def _degrees(angle_in_radians: float) -> float:
    from gemswap.vectors import degrees

    return degrees(angle_in_radians)