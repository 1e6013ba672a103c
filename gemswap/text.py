"""Bitmap-font text: font files, format strings, layout and drawing."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import pygame

from gemswap.assets import Texture
from gemswap.matrix import Mat4
from gemswap.render import Renderer2D
from gemswap.vectors import Vec2, map_to_range

_FIELDS_PER_GLYPH = 8
_LINE_HEIGHT = 70.0
_ADVANCE_TRIM = 8


@dataclass(frozen=True)
class Glyph:
    """Where a character sits in the atlas and how it is spaced, in pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    advance: int = 0


@dataclass(frozen=True)
class GlyphPlacement:
    """One character laid out on screen."""

    char: str
    glyph: Glyph
    offset: Vec2
    scale: Vec2
    tex_coords: Tuple[float, float, float, float]


def parse_font(lines: Iterable[str]) -> Dict[str, Glyph]:
    """Read glyph records of eight comma-separated integers each.

    Each record is ``id,x,y,width,height,offset_x,offset_y,advance``; the
    first record for a character wins.
    """
    tokens = [t for t in re.split(r"[\s,]+", "\n".join(lines)) if t]
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed font data: {exc}") from None
    if len(values) % _FIELDS_PER_GLYPH:
        raise ValueError("font data ends with an incomplete glyph record")
    glyphs: Dict[str, Glyph] = {}
    for record in zip(*[iter(values)] * _FIELDS_PER_GLYPH):
        char_id, *fields = record
        glyphs.setdefault(chr(char_id), Glyph(*fields))
    return glyphs


def format_text(fmt: str, *args: Any) -> str:
    """Expand ``%d`` and ``%f``; any other ``%`` directive is dropped."""
    pending = iter(args)

    def next_arg() -> Any:
        try:
            return next(pending)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    out: List[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "d":
            out.append(str(int(next_arg())))
        elif spec == "f":
            out.append(f"{float(next_arg()):f}")
    return "".join(out)


class TextRenderer(Renderer2D):
    """Lays out and draws text from a bitmap font atlas."""

    def __init__(
        self,
        surface: pygame.Surface,
        projection: Mat4,
        view: Mat4,
        atlas: Texture,
        font_path: Union[str, os.PathLike],
    ) -> None:
        super().__init__(projection, view)
        self.surface = surface
        width, height = surface.get_size()
        self.viewport = Vec2(float(width), float(height))
        self.characters: Dict[str, Glyph] = {}
        self.atlas = atlas
        self.load(atlas, font_path)

    def load(self, atlas: Texture, font_path: Union[str, os.PathLike]) -> None:
        """Use ``atlas`` and add the glyphs described in ``font_path``."""
        try:
            with open(font_path, encoding="utf-8") as handle:
                glyphs = parse_font(handle)
        except OSError as exc:
            raise RuntimeError(f"failed to read font {os.fspath(font_path)!r}") from exc
        self.atlas = atlas
        for char, glyph in glyphs.items():
            self.characters.setdefault(char, glyph)

    def layout(self, position: Vec2, size: float, text: str) -> List[GlyphPlacement]:
        """Place each character of ``text``; newlines start a new line."""
        scale = map_to_range(1.0, 300.0, 0.2, 5.0, size)
        atlas_size = self.atlas.size
        cursor = position
        placements: List[GlyphPlacement] = []
        for char in text:
            glyph = self.characters.get(char, Glyph())
            if char == "\n":
                cursor = Vec2(position.x, cursor.y + scale * _LINE_HEIGHT)
                continue
            placements.append(
                GlyphPlacement(
                    char=char,
                    glyph=glyph,
                    offset=cursor + Vec2(glyph.offset_x, glyph.offset_y) * scale,
                    scale=Vec2(glyph.width, glyph.height) * scale,
                    tex_coords=(
                        glyph.x / atlas_size.x,
                        glyph.y / atlas_size.y,
                        glyph.width / atlas_size.x,
                        glyph.height / atlas_size.y,
                    ),
                )
            )
            cursor = Vec2(cursor.x + (glyph.advance - _ADVANCE_TRIM) * scale, cursor.y)
        return placements

    def _glyph_image(
        self, placement: GlyphPlacement
    ) -> Optional[Tuple[pygame.Surface, pygame.Rect]]:
        rect = self._screen_rect(placement.offset, placement.scale)
        if rect.w <= 0 or rect.h <= 0:
            return None
        glyph = placement.glyph
        source = pygame.Rect(glyph.x, glyph.y, glyph.width, glyph.height).clip(
            self.atlas.surface.get_rect()
        )
        if source.w <= 0 or source.h <= 0:
            return None
        image = pygame.Surface(rect.size, pygame.SRCALPHA)
        image.blit(
            pygame.transform.scale(self.atlas.surface.subsurface(source), rect.size),
            (0, 0),
        )
        return image, rect

    def text(
        self, position: Vec2, size: float, color: Iterable[float], fmt: str, *args: Any
    ) -> List[GlyphPlacement]:
        """Draw formatted text tinted with ``color``; returns the layout."""
        rgba = self._rgba(color)
        placements = self.layout(position, size, format_text(fmt, *args))
        for placement in placements:
            drawn = self._glyph_image(placement)
            if drawn is None:
                continue
            image, rect = drawn
            image.fill(rgba, special_flags=pygame.BLEND_RGBA_MULT)
            self.surface.blit(image, rect.topleft)
        return placements

    def textured_text(
        self, position: Vec2, size: float, texture: Texture, fmt: str, *args: Any
    ) -> List[GlyphPlacement]:
        """Draw formatted text coloured by ``texture``; returns the layout."""
        placements = self.layout(position, size, format_text(fmt, *args))
        for placement in placements:
            drawn = self._glyph_image(placement)
            if drawn is None:
                continue
            image, rect = drawn
            pattern = pygame.transform.scale(texture.surface, rect.size)
            image.blit(pattern, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
            self.surface.blit(image, rect.topleft)
        return placements