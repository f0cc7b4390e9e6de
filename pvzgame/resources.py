"""A cache of textures keyed by the path they were loaded from."""

from __future__ import annotations

import os
import weakref
from typing import ClassVar, Iterator, Optional

import pygame

from pvzgame import logger
from pvzgame.texture import Texture


class ResourceError(Exception):
    """Raised on misuse of the resource manager."""


class ResourceManager:
    """Loads textures once and hands them out by path.

    Only one open manager may exist at a time.
    """

    _active: ClassVar[Optional[weakref.ref]] = None

    def __init__(self, target: pygame.Surface) -> None:
        if target is None:
            raise ResourceError("Renderer cannot be null")
        current = ResourceManager._active() if ResourceManager._active is not None else None
        if current is not None and not current.closed:
            raise ResourceError("ResourceManager already initialized")
        self._target: Optional[pygame.Surface] = target
        self._textures: dict[str, Texture] = {}
        self._closed = False
        ResourceManager._active = weakref.ref(self)

    def __enter__(self) -> "ResourceManager":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._textures)

    def __contains__(self, path) -> bool:
        return os.fspath(path) in self._textures

    def __iter__(self) -> Iterator[str]:
        return iter(self._textures)

    @property
    def target(self) -> Optional[pygame.Surface]:
        return self._target

    @property
    def closed(self) -> bool:
        return self._closed

    def load_resource(self, path: str | os.PathLike) -> Texture:
        """Load the image at ``path`` and keep it under that path."""
        if self._closed:
            raise ResourceError("ResourceManager is closed")
        key = os.fspath(path)
        logger.debug("%s - Loading resource", key)
        if key in self._textures:
            raise ResourceError(f"{key} - Resource already loaded")
        texture = Texture()
        texture.load_from_file(key)
        self._textures[key] = texture
        logger.debug("%s - Resource loaded", key)
        return texture

    def get_resource(self, path: str | os.PathLike) -> Optional[Texture]:
        """The texture loaded from ``path``, or None."""
        return self._textures.get(os.fspath(path))

    def free_all(self) -> None:
        """Free and forget every loaded texture."""
        logger.debug("freeing all resources:")
        for key, texture in self._textures.items():
            logger.debug(" >> freeing resource: %s", key)
            texture.free()
        self._textures.clear()
        logger.debug("all resources freed")

    def close(self) -> None:
        """Free everything and release the manager so another may be made."""
        if self._closed:
            return
        self._target = None
        self.free_all()
        self._closed = True
        if ResourceManager._active is not None and ResourceManager._active() is self:
            ResourceManager._active = None