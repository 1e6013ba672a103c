import logging

import pygame
import pytest

from gemswap.assets import AssetError
from gemswap.game import Game, main, setup_logging
from gemswap.randomness import get_random
from gemswap.settings import GRID_COLS, HEIGHT, WIDTH
from gemswap.shared import GameState, SlotState
from gemswap.states.mouse_input import MouseInputState

BG = (10, 20, 30)

SPRITES = [
    "bg.png",
    "selected.png",
    "gem_bg.png",
    "stone.png",
    "3.png",
    "5.png",
    "7.png",
    "14.png",
    "17.png",
    "burst_sprite_sheet.png",
    "hint_bg.png",
]


def make_resources(root):
    sprites = root / "sprites"
    fonts = root / "bitmap fonts"
    sprites.mkdir(parents=True)
    fonts.mkdir(parents=True)
    for number, name in enumerate(SPRITES):
        surface = pygame.Surface((32, 32))
        surface.fill(BG if name == "bg.png" else (200, 10 * number, 100))
        pygame.image.save(surface, str(sprites / name))
    atlas = pygame.Surface((32, 32))
    atlas.fill((255, 255, 255))
    pygame.image.save(atlas, str(fonts / "Consolas.png"))
    (fonts / "Consolas.fnt").write_text("70,0,0,4,4,0,0,10,\n", encoding="utf-8")
    return root


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def game(tmp_path, headless):
    resources = make_resources(tmp_path / "Resources")
    get_random().reseed(1)
    return Game("Match 3", WIDTH, HEIGHT, False, resources)


def test_starts_by_filling_entry_slots(game):
    assert game.state.kind is GameState.FILLING_UP_EMPTY_SLOTS
    entry = [s for s in game.grid.slots[:GRID_COLS] if s.state is not SlotState.BLOCKED]
    assert len(game.grid.gems) == len(entry)


def test_fill_hands_over_to_match_resolution(game):
    for _ in range(5000):
        game.tick(0.05)
        if game.state.kind is not GameState.FILLING_UP_EMPTY_SLOTS:
            break
    assert game.state.kind is GameState.RESOLVING_MATCHES
    free = {s.index for s in game.grid.slots if s.state is SlotState.FREE}
    assert free == {s.index for s in game.state.matched}


def test_escape_closes_and_keys_are_tracked(game):
    game.on_key(pygame.K_a, True)
    assert game.keys[pygame.K_a] is True
    assert game.running is True
    game.on_key(pygame.K_ESCAPE, True)
    assert game.running is False
    game.on_key(pygame.K_a, False)
    assert game.keys[pygame.K_a] is False


def test_cursor_motion_event_updates_position(game):
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 200), rel=(0, 0), buttons=(0, 0, 0))
    game.handle_event(event)
    assert (game.last_cursor_pos.x, game.last_cursor_pos.y) == (100.0, 200.0)


def test_quit_event_stops_game(game):
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_left_press_selects_slot_in_input_state(game):
    game.state = MouseInputState(game.grid, game.sound)
    slot = next(s for s in game.grid.slots if s.state is not SlotState.BLOCKED)
    game.on_cursor_move(slot.center.x, slot.center.y)
    game.on_mouse_button(pygame.BUTTON_LEFT, True)
    assert game.state.selected_slot is slot


def test_other_buttons_are_ignored(game):
    game.state = MouseInputState(game.grid, game.sound)
    slot = next(s for s in game.grid.slots if s.state is not SlotState.BLOCKED)
    game.on_cursor_move(slot.center.x, slot.center.y)
    game.on_mouse_button(pygame.BUTTON_RIGHT, True)
    assert game.state.selected_slot is None


def test_render_draws_background(game):
    game.render()
    assert tuple(game.screen.get_at((5, 5)))[:3] == BG


def test_start_runs_one_frame_then_quits(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.start()
    assert game.running is False
    assert game.frames == 1


def test_missing_resources_raise(tmp_path, headless):
    with pytest.raises(AssetError):
        Game("Match 3", WIDTH, HEIGHT, False, tmp_path / "missing")


def test_setup_logging_writes_header_and_messages(tmp_path):
    path = tmp_path / "log.txt"
    handler = setup_logging("Match 3", path)
    try:
        logging.getLogger("gemswap.game").info("hello")
        handler.flush()
        assert path.read_text(encoding="utf-8") == "Match 3\n\n\nhello\n"
    finally:
        logging.getLogger("gemswap").removeHandler(handler)
        handler.close()


def test_main_logs_failure_and_closes_log(tmp_path, headless, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--resources", str(tmp_path / "missing")]) == 0
    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert text.startswith("Match 3\n\n\n")
    assert text.endswith("---END--\n")
    assert len(text.splitlines()) > 4