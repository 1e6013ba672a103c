import pygame
import pytest

from gemswap.assets import AssetManager, Texture
from gemswap.grid import TEXTURE_NAMES, GridController
from gemswap.randomness import RandomSource
from gemswap.settings import get_index
from gemswap.shared import GameState, GemType, SlotState
from gemswap.sound import SoundController, SoundEffect
from gemswap.states.match_resolution import MatchResolutionState


class Clip:
    def __init__(self):
        self.plays = 0
        self.volume = None

    def set_volume(self, volume):
        self.volume = volume

    def play(self):
        self.plays += 1


@pytest.fixture
def controller():
    manager = AssetManager()
    for name in TEXTURE_NAMES:
        size = (560, 400) if name == "burst" else (64, 64)
        manager.add_texture(name, Texture(pygame.Surface(size)))
    return GridController(None, None, manager, None, RandomSource(5))


@pytest.fixture
def clip():
    return Clip()


@pytest.fixture
def sound(clip):
    return SoundController({SoundEffect.MATCH: clip})


def base_pattern(row, col):
    return GemType((row + 2 * col) % 5)


def fill(controller, overrides=None, pattern=base_pattern):
    overrides = overrides or {}
    for slot in controller.slots:
        if slot.state is SlotState.BLOCKED:
            continue
        slot.gem_type = overrides.get((slot.row, slot.col), pattern(slot.row, slot.col))
        slot.state = SlotState.OCCUPIED
        gem = controller.create_orphan_gem(True)
        gem.change_pos(slot.row, slot.col)


def open_indices(controller):
    return {s.index for s in controller.slots if s.state is not SlotState.BLOCKED}


def test_kind(controller, sound):
    assert MatchResolutionState(controller, sound).kind is GameState.RESOLVING_MATCHES


def test_no_matches_goes_to_input(controller, sound, clip):
    fill(controller)
    state = MatchResolutionState(controller, sound)
    state.execute()
    assert state.matched == []
    assert state.direct_to_input
    assert state.is_done()
    assert clip.plays == 0
    assert state.next_state().kind is GameState.MOUSE_INPUT_STATE


def test_horizontal_match_is_cleared(controller, sound, clip):
    line = {(3, c): GemType.COLOR_2 for c in range(3)}
    fill(controller, line)
    state = MatchResolutionState(controller, sound)
    state.execute()
    expected = {get_index(r, c) for r, c in line}
    assert {s.index for s in state.matched} == expected
    assert all(controller.slots[i].state is SlotState.FREE for i in expected)
    assert clip.plays == 1
    assert controller.effects_active
    assert not state.is_done()
    assert state.next_state().kind is GameState.FILLING_UP_EMPTY_SLOTS


def test_vertical_match_is_cleared(controller, sound):
    line = {(r, 5): GemType.COLOR_2 for r in range(2, 5)}
    fill(controller, line)
    state = MatchResolutionState(controller, sound)
    state.execute()
    expected = {get_index(r, c) for r, c in line}
    assert {s.index for s in state.matched} == expected
    assert not state.direct_to_input


def test_matched_gems_are_removed(controller, sound):
    line = {(3, c): GemType.COLOR_2 for c in range(3)}
    fill(controller, line)
    before = len(controller.gems)
    matched_gems = [
        controller.gem_for_slot(controller.slots[get_index(r, c)]) for r, c in line
    ]
    state = MatchResolutionState(controller, sound)
    state.execute()
    assert not any(gem.active for gem in matched_gems)
    controller.update(0.01)
    assert len(controller.gems) == before - len(line)


def test_uniform_board_matches_every_open_slot_once(controller, sound):
    fill(controller, pattern=lambda r, c: GemType.COLOR_3)
    state = MatchResolutionState(controller, sound)
    state.execute()
    indices = [s.index for s in state.matched]
    assert len(indices) == len(set(indices))
    assert set(indices) == open_indices(controller)


def test_done_once_effects_finish(controller, sound):
    fill(controller, {(3, c): GemType.COLOR_2 for c in range(3)})
    state = MatchResolutionState(controller, sound)
    state.execute()
    for _ in range(200):
        controller.update(0.02)
        if state.is_done():
            break
    assert state.is_done()
    assert not controller.effects_active