import pygame
import pytest

from gemswap.assets import AssetError, AssetManager, Texture, get_asset_manager
from gemswap.vectors import Vec2


def test_texture_size_matches_surface():
    texture = Texture(pygame.Surface((30, 20)))
    assert texture.size == Vec2(30.0, 20.0)


def test_load_texture_from_file(tmp_path):
    path = tmp_path / "gem.bmp"
    pygame.image.save(pygame.Surface((12, 7)), str(path))
    manager = AssetManager()
    loaded = manager.load_texture("gem1", path)
    assert loaded.size == Vec2(12.0, 7.0)
    assert manager.texture("gem1") is loaded


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(AssetError):
        AssetManager().load_texture("gem1", tmp_path / "missing.bmp")


def test_add_texture_then_lookup():
    manager = AssetManager()
    texture = Texture(pygame.Surface((4, 4)))
    assert manager.add_texture("slot", texture) is texture
    assert manager.texture("slot") is texture


def test_unknown_texture_raises():
    with pytest.raises(AssetError):
        AssetManager().texture("nothing")


def test_shared_manager_keeps_textures_between_calls():
    texture = Texture(pygame.Surface((9, 3)))
    get_asset_manager().add_texture("shared-test-texture", texture)
    found = get_asset_manager().texture("shared-test-texture")
    assert found.size == Vec2(9.0, 3.0)
    assert found is texture