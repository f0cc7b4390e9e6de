"""Images loaded from disk and drawn onto surfaces."""

from __future__ import annotations

import os
from typing import Optional

import pygame

from pvzgame import logger

COLOR_KEY = (0x00, 0xFF, 0xFF)
_WHITE = (0xFF, 0xFF, 0xFF)
_OPAQUE = 0xFF


class TextureError(Exception):
    """Raised when a texture cannot be loaded or drawn."""


def _byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")
    return value


class Texture:
    """An image with colour, alpha and blend modulation applied when drawn.

    Pixels of the colour (0, 255, 255) are treated as transparent.
    """

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None
        self._color = _WHITE
        self._alpha = _OPAQUE
        self._blend = 0

    def __repr__(self) -> str:
        return f"Texture(width={self.width}, height={self.height})"

    @property
    def loaded(self) -> bool:
        return self._surface is not None

    @property
    def surface(self) -> Optional[pygame.Surface]:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.get_width() if self._surface is not None else 0

    @property
    def height(self) -> int:
        return self._surface.get_height() if self._surface is not None else 0

    @property
    def color(self) -> tuple[int, int, int]:
        return self._color

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def blend_mode(self) -> int:
        return self._blend

    def load_from_file(self, path: str | os.PathLike) -> None:
        """Load an image, replacing whatever this texture held before."""
        if self._surface is not None:
            self.free()
        path = os.fspath(path)
        try:
            surface = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            logger.error("Unable to load image %s! Error: %s", path, exc)
            raise TextureError(f"Unable to load image {path}: {exc}") from exc
        surface.set_colorkey(COLOR_KEY)
        self._surface = surface

    def free(self) -> None:
        """Drop the loaded image."""
        self._surface = None

    def set_color(self, red: int, green: int, blue: int) -> None:
        """Set the colour each pixel is multiplied by when drawn."""
        self._color = (_byte("red", red), _byte("green", green), _byte("blue", blue))

    def set_blend_mode(self, blending: int) -> None:
        """Set the pygame blend flags used when drawing (0 for plain copying)."""
        if isinstance(blending, bool) or not isinstance(blending, int) or blending < 0:
            raise ValueError(f"blend mode must be a non-negative integer, got {blending!r}")
        self._blend = blending

    def set_alpha(self, alpha: int) -> None:
        """Set the overall opacity used when drawing."""
        self._alpha = _byte("alpha", alpha)

    def _prepared(self) -> pygame.Surface:
        assert self._surface is not None
        if self._color == _WHITE and self._alpha == _OPAQUE:
            return self._surface
        image = pygame.Surface(self._surface.get_size(), pygame.SRCALPHA, 32)
        image.blit(self._surface, (0, 0))
        if self._color != _WHITE:
            image.fill((*self._color, _OPAQUE), special_flags=pygame.BLEND_RGBA_MULT)
        if self._alpha != _OPAQUE:
            image.set_alpha(self._alpha)
        return image

    def render(self, target: pygame.Surface, x: int, y: int, clip=None) -> pygame.Rect:
        """Draw onto ``target`` with the top-left corner at (x, y).

        ``clip`` selects a part of the image; the drawn area then takes its
        size. Returns the destination rectangle.
        """
        if self._surface is None:
            raise TextureError("Texture has not been loaded")
        area = pygame.Rect(clip) if clip is not None else None
        if area is None:
            dest = pygame.Rect(x, y, self.width, self.height)
        else:
            dest = pygame.Rect(x, y, area.width, area.height)
        target.blit(self._prepared(), dest, area, special_flags=self._blend)
        return dest