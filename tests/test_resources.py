import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pvzgame.resources import ResourceError, ResourceManager
from pvzgame.texture import TextureError


@pytest.fixture
def target():
    return pygame.Surface((8, 8))


@pytest.fixture
def manager(target):
    with ResourceManager(target) as mgr:
        yield mgr


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((3, 2))
    surface.fill((200, 100, 50))
    path = tmp_path / "img.bmp"
    pygame.image.save(surface, str(path))
    return path


def test_null_target_rejected():
    with pytest.raises(ResourceError):
        ResourceManager(None)


def test_load_and_get(manager, image_path):
    texture = manager.load_resource(image_path)
    assert manager.get_resource(image_path) is texture
    assert manager.get_resource(str(image_path)) is texture
    assert (texture.width, texture.height) == (3, 2)
    assert len(manager) == 1
    assert image_path in manager


def test_missing_resource_is_none(manager):
    assert manager.get_resource("nothing.png") is None


def test_duplicate_load_raises(manager, image_path):
    manager.load_resource(image_path)
    with pytest.raises(ResourceError):
        manager.load_resource(image_path)
    assert len(manager) == 1


def test_failed_load_is_not_stored(manager, tmp_path):
    missing = tmp_path / "missing.bmp"
    with pytest.raises(TextureError):
        manager.load_resource(missing)
    assert missing not in manager
    assert len(manager) == 0


def test_free_all(manager, image_path):
    texture = manager.load_resource(image_path)
    manager.free_all()
    assert len(manager) == 0
    assert manager.get_resource(image_path) is None
    assert texture.width == 0


def test_only_one_open_manager(manager, target):
    with pytest.raises(ResourceError):
        ResourceManager(target)


def test_close_allows_new_manager(target, image_path):
    first = ResourceManager(target)
    texture = first.load_resource(image_path)
    first.close()
    assert first.closed
    assert first.target is None
    assert not texture.loaded
    with ResourceManager(target) as second:
        assert second.target is target
        assert len(second) == 0


def test_load_after_close_raises(target, image_path):
    mgr = ResourceManager(target)
    mgr.close()
    with pytest.raises(ResourceError):
        mgr.load_resource(image_path)


def test_iteration_lists_paths(manager, image_path, tmp_path):
    other = tmp_path / "other.bmp"
    pygame.image.save(pygame.Surface((1, 1)), str(other))
    manager.load_resource(image_path)
    manager.load_resource(other)
    assert list(manager) == [str(image_path), str(other)]