import pytest

from gemswap import settings
from gemswap.camera import Camera
from gemswap.vectors import Vec2


def test_reset_places_camera_at_point():
    camera = Camera(Vec2(12.0, 34.0))
    assert camera.position == Vec2(12.0, 34.0)


def test_view_translation_follows_position():
    camera = Camera(Vec2(12.0, 34.0))
    assert camera.view[3, 0] == pytest.approx(-12.0)
    assert camera.view[3, 1] == pytest.approx(-34.0)


def test_update_centres_screen_on_point():
    camera = Camera(Vec2())
    camera.map_size = Vec2(1000.0, 1000.0)
    camera.update(Vec2(settings.WIDTH / 2 + 100.0, settings.HEIGHT / 2 + 50.0))
    assert camera.position == Vec2(100.0, 50.0)
    assert camera.view[3, 0] == pytest.approx(-100.0)


def test_update_clamps_to_map_size():
    camera = Camera(Vec2())
    camera.map_size = Vec2(300.0, 200.0)
    camera.update(Vec2(10_000.0, 10_000.0))
    assert camera.position == camera.map_size


def test_update_clamps_to_origin():
    camera = Camera(Vec2())
    camera.map_size = Vec2(300.0, 200.0)
    camera.update(Vec2(-500.0, -500.0))
    assert camera.position == Vec2()