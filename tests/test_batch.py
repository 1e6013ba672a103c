import pygame
import pytest

from gemswap.assets import Texture
from gemswap.batch import BatchRenderer
from gemswap.grid import InstancingData
from gemswap.matrix import Mat4, ortho
from gemswap.settings import HEIGHT, WIDTH
from gemswap.vectors import Vec2

RED = (255, 0, 0)
GREEN = (0, 255, 0)


def _texture(color):
    surface = pygame.Surface((4, 4))
    surface.fill(color)
    return Texture(surface)


@pytest.fixture
def target():
    return pygame.Surface((WIDTH, HEIGHT))


@pytest.fixture
def renderer(target):
    projection = ortho(0.0, float(WIDTH), float(HEIGHT), 0.0, -1.0, 1.0)
    return BatchRenderer(target, projection, Mat4.identity())


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_draws_instance_with_its_texture(renderer, target):
    data = InstancingData()
    data.add(Vec2(10.0, 10.0), Vec2(20.0, 20.0), 1)
    drawn = renderer.render(data, [_texture(GREEN), _texture(RED)])
    assert drawn == 1
    assert _rgb(target, (15, 15)) == RED
    assert _rgb(target, (5, 5)) == (0, 0, 0)
    assert _rgb(target, (35, 35)) == (0, 0, 0)


def test_empty_batch_draws_nothing(renderer, target):
    assert renderer.render(InstancingData(), [_texture(RED)]) == 0
    assert _rgb(target, (0, 0)) == (0, 0, 0)


def test_later_instances_cover_earlier_ones(renderer, target):
    data = InstancingData()
    data.add(Vec2(100.0, 100.0), Vec2(40.0, 40.0), 0)
    data.add(Vec2(110.0, 110.0), Vec2(40.0, 40.0), 1)
    assert renderer.render(data, [_texture(RED), _texture(GREEN)]) == 2
    assert _rgb(target, (105, 105)) == RED
    assert _rgb(target, (120, 120)) == GREEN


def test_zero_sized_instance_is_skipped(renderer, target):
    data = InstancingData()
    data.add(Vec2(50.0, 50.0), Vec2(0.0, 0.0), 0)
    data.add(Vec2(200.0, 200.0), Vec2(10.0, 10.0), 0)
    assert renderer.render(data, [_texture(RED)]) == 1
    assert _rgb(target, (205, 205)) == RED


def test_texture_index_out_of_range(renderer):
    data = InstancingData()
    data.add(Vec2(0.0, 0.0), Vec2(10.0, 10.0), 3)
    with pytest.raises(IndexError):
        renderer.render(data, [_texture(RED)])


def test_negative_texture_index_rejected(renderer):
    data = InstancingData()
    data.add(Vec2(0.0, 0.0), Vec2(10.0, 10.0), -1)
    with pytest.raises(IndexError):
        renderer.render(data, [_texture(RED)])


def test_mismatched_lists_rejected(renderer):
    data = InstancingData([Vec2(0.0, 0.0)], [], [0])
    with pytest.raises(ValueError):
        renderer.render(data, [_texture(RED)])