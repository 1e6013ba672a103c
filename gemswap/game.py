"""The game window, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import os

import pygame

from gemswap.assets import AssetError, AssetManager
from gemswap.batch import BatchRenderer
from gemswap.camera import Camera
from gemswap.grid import GridController
from gemswap.matrix import ortho
from gemswap.randomness import get_random
from gemswap.render import SpriteRenderer
from gemswap.settings import HEIGHT, WIDTH
from gemswap.shared import GameState
from gemswap.sound import get_sound_controller
from gemswap.states.base import State
from gemswap.states.fill import FillEmptySlotsState
from gemswap.text import TextRenderer
from gemswap.timer import Timer
from gemswap.vectors import Vec2

logger = logging.getLogger(__name__)

_LOG_END = "---END--"
_TITLE = "Match 3"

# Texture names and their files, relative to the resource directory.
_TEXTURES = (
    ("font texture", "bitmap fonts/Consolas.png"),
    ("bg", "sprites/bg.png"),
    ("selection", "sprites/selected.png"),
    ("slot", "sprites/gem_bg.png"),
    ("block", "sprites/stone.png"),
    ("gem1", "sprites/3.png"),
    ("gem2", "sprites/5.png"),
    ("gem3", "sprites/7.png"),
    ("gem4", "sprites/14.png"),
    ("gem5", "sprites/17.png"),
    ("burst", "sprites/burst_sprite_sheet.png"),
    ("hint", "sprites/hint_bg.png"),
)
_FONT_FILE = "bitmap fonts/Consolas.fnt"
_TEXT_COLOR = (1.0, 0.4, 1.0)


def setup_logging(
    header: str = _TITLE, path: Union[str, os.PathLike] = "log.txt"
) -> logging.FileHandler:
    """Start a fresh log file with ``header`` and send the package's log to it."""
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{header}\n\n\n")
    except OSError as exc:
        raise RuntimeError(f"failed to create a log file: {exc}") from exc
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("gemswap")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)
    return handler


def _finish_logging(handler: logging.FileHandler) -> None:
    logging.getLogger("gemswap").removeHandler(handler)
    handler.close()
    with open(handler.baseFilename, "a", encoding="utf-8") as handle:
        handle.write(f"{_LOG_END}\n")


class Game:
    """Opens the window, owns the board and drives the state machine."""

    def __init__(
        self,
        name: str = _TITLE,
        width: int = WIDTH,
        height: int = HEIGHT,
        full_screen: bool = False,
        resource_dir: Union[str, os.PathLike] = "Resources",
    ) -> None:
        self.name = name
        self.width = width
        self.height = height
        # Recorded only: the window is always created windowed.
        self.full_screen = full_screen
        self.resource_dir = Path(resource_dir)
        self.keys: Dict[int, bool] = {}
        self.last_cursor_pos = Vec2()
        self.running = True
        self.frames = 0

        pygame.init()
        try:
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError(f"failed to create window: {exc}") from exc
        pygame.display.set_caption(name)
        self.timer = Timer()

        self.projection = ortho(0.0, float(WIDTH), float(HEIGHT), 0.0, -1.0, 1.0)
        self.camera = Camera(Vec2(0.0, 0.0))
        self.assets = AssetManager()
        self.sound = get_sound_controller()

        self._load_assets()
        self._setup_renderers()
        self._init_gameplay()

    def _load_assets(self) -> None:
        for name, relative in _TEXTURES:
            self.assets.load_texture(name, str(self.resource_dir / relative))

    def _setup_renderers(self) -> None:
        view = self.camera.view
        self.sprite_renderer = SpriteRenderer(self.screen, self.projection, view)
        self.text_renderer = TextRenderer(
            self.screen,
            self.projection,
            view,
            self.assets.texture("font texture"),
            self.resource_dir / _FONT_FILE,
        )
        self.batch_renderer = BatchRenderer(self.screen, self.projection, view)

    def _init_gameplay(self) -> None:
        self.grid = GridController(
            self.sprite_renderer,
            self.text_renderer,
            self.assets,
            self.batch_renderer,
            get_random(),
        )
        self.state: State = FillEmptySlotsState(self.grid, self.sound)
        self.state.execute()

    def start(self) -> None:
        """Run the main loop until the window is asked to close."""
        logger.info("starting loop")
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.timer.update()
                self.loop()
                pygame.display.flip()
        finally:
            pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
            self.on_key(event.key, event.type == pygame.KEYDOWN)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            self.on_mouse_button(event.button, event.type == pygame.MOUSEBUTTONDOWN)
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.on_cursor_move(x, y)

    def on_key(self, key: int, pressed: bool) -> None:
        """Track held keys; Escape closes the window."""
        if key == pygame.K_ESCAPE and pressed:
            self.running = False
        self.keys[key] = pressed

    def on_mouse_button(self, button: int, pressed: bool) -> None:
        """Pass left-button presses and releases to the input state."""
        if self.state.kind is not GameState.MOUSE_INPUT_STATE:
            return
        if button != pygame.BUTTON_LEFT:
            return
        if pressed:
            self.state.on_mouse_down(self.last_cursor_pos)
        else:
            self.state.on_mouse_up(self.last_cursor_pos)

    def on_cursor_move(self, x: float, y: float) -> None:
        self.last_cursor_pos = Vec2(float(x), float(y))

    def loop(self) -> None:
        """One frame: clear, advance by the timer's delta, draw."""
        self.screen.fill((0, 0, 0))
        self.tick(self.timer.delta_time)
        self.render()
        self.frames += 1

    def tick(self, dt: float) -> None:
        """Advance the board and the current state; switch state when it is done."""
        self.grid.update(dt)
        self.state.update(dt)
        if self.state.is_done():
            following = self.state.next_state()
            if following is None:
                raise RuntimeError(f"state {self.state.kind.name} has no successor")
            self.state = following
            self.state.execute()

    def render(self) -> None:
        background = self.assets.texture("bg")
        self.sprite_renderer.draw_image(
            background, Vec2(0.0, 0.0), Vec2(1024.0, 768.0), 0.0
        )
        self.grid.render()
        self.text_renderer.text(
            Vec2(WIDTH / 2, 13.0), 20.0, _TEXT_COLOR, "FPS = %d", self.timer.fps
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gemswap", description="A match-three puzzle game.")
    parser.add_argument(
        "--resources",
        default="Resources",
        help="directory holding the sprites and the bitmap font",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    handler = setup_logging(_TITLE, "log.txt")
    print("starting game")
    try:
        game = Game(_TITLE, WIDTH, HEIGHT, True, args.resources)
        game.start()
    except (RuntimeError, AssetError, pygame.error) as exc:
        logger.error("%s", exc)
    finally:
        pygame.quit()
        _finish_logging(handler)
    return 0


_all_textures: List[str] = [name for name, _ in _TEXTURES]