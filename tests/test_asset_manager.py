"""Tests for decoration images."""

import pygame

from core.asset_manager import AssetManager


def test_missing_file_gives_transparent_placeholder(tmp_path):
    assets = AssetManager(tmp_path)
    surf = assets.get_image("nope.png", (80, 60))
    assert surf.get_size() == (80, 60)
    assert surf.get_at((10, 10)).a == 0


def test_cached_per_size(tmp_path):
    src = pygame.Surface((20, 20))
    src.fill((255, 0, 0))
    pygame.image.save(src, str(tmp_path / "bg.png"))

    assets = AssetManager(tmp_path)
    a = assets.get_image("bg.png", (40, 40))
    assert assets.get_image("bg.png", (40, 40)) is a
    assert assets.get_image("bg.png").get_size() == (20, 20)
    assert a.get_at((5, 5))[:3] == (255, 0, 0)


def write_png(path):
    src = pygame.Surface((10, 10))
    src.fill((0, 0, 255))
    pygame.image.save(src, str(path))


def test_loads_without_display(tmp_path):
    write_png(tmp_path / "bg.png")
    pygame.display.quit()
    surf = AssetManager(tmp_path).get_image("bg.png")
    assert surf.get_at((1, 1))[:3] == (0, 0, 255)


def test_converted_once_display_exists(tmp_path, screen):
    write_png(tmp_path / "bg.png")
    surf = AssetManager(tmp_path).get_image("bg.png")
    assert surf.get_flags() & pygame.SRCALPHA


def test_shares_shape_image_decoder(tmp_path, monkeypatch):
    seen = []

    def fake_load(path):
        seen.append(path)
        return pygame.Surface((4, 4), pygame.SRCALPHA)

    monkeypatch.setattr("core.asset_manager.load_image", fake_load)
    AssetManager(tmp_path).get_image("deco.png")
    assert seen == [tmp_path / "deco.png"]
