"""Window, frame pacing and subsystem setup."""

from __future__ import annotations

import time
from typing import Callable, Optional

import pygame

from pvzgame import logger
from pvzgame.resources import ResourceManager

TITLE = "Plants Vs. Zombies"


class GraphicsError(Exception):
    """Raised when the display cannot be set up or used."""


class Graphics:
    """Owns the display surface and paces frames to a target rate."""

    def __init__(
        self,
        target_fps: int = 60,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.target_fps = target_fps
        self.screen: Optional[pygame.Surface] = None
        self._now: Optional[float] = None
        self._last: Optional[float] = None
        self.delta_time = 0.0

    def __enter__(self) -> "Graphics":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def target_fps(self) -> int:
        return self._target_fps

    @target_fps.setter
    def target_fps(self, value: int) -> None:
        if value <= 0:
            raise ValueError(f"target fps must be positive, got {value!r}")
        self._target_fps = value
        self._frame_duration = 1000.0 / value

    @property
    def frame_duration(self) -> int:
        """Milliseconds per frame, truncated."""
        return int(self._frame_duration)

    def init_sdl(self) -> None:
        """Start pygame with video, image, font and audio support."""
        pygame.mixer.pre_init(44100, -16, 2, 2048)
        pygame.init()
        if not pygame.display.get_init():
            message = pygame.get_error()
            logger.fatal("SDL Init error %s", message)
            raise GraphicsError(f"SDL Init error {message}")

        if pygame.image.get_extended():
            logger.debug("Image module initialized succesfully with flags: PNG, JPG")
        else:
            logger.error("Image module failed to initialize properly")

        if pygame.font.get_init():
            logger.debug("Font module initialized succesfully")
        else:
            logger.error("Font module failed to initialize properly")

        if pygame.mixer.get_init():
            logger.debug("Mixer module initialized succesfully")
        else:
            logger.error("Mixer module failed to initialize properly: %s", pygame.get_error())

        logger.info("SDL version: %d.%d.%d", *pygame.get_sdl_version())

    def init_graphics(self, size: tuple[int, int] = (0, 0), fullscreen: bool = True) -> pygame.Surface:
        """Open the window; (0, 0) with fullscreen uses the desktop size."""
        flags = pygame.FULLSCREEN if fullscreen else 0
        try:
            self.screen = pygame.display.set_mode(size, flags)
        except pygame.error as exc:
            logger.error("Window creation failed: %s", exc)
            raise GraphicsError(f"Window creation failed: {exc}") from exc
        pygame.display.set_caption(TITLE)
        logger.debug("Window initialized succesfully")
        return self.screen

    def frame_start(self) -> None:
        """Mark the start of a frame and update ``delta_time`` in milliseconds."""
        self._last = self._now
        self._now = self._clock()
        if self._last is None:
            self.delta_time = 0.0
        else:
            self.delta_time = (self._now - self._last) * 1000.0

    def frame_end(self) -> int:
        """Sleep out what is left of the frame; return the milliseconds slept."""
        if self._now is None:
            raise GraphicsError("frame_end called before frame_start")
        frame_time = (self._clock() - self._now) * 1000.0
        delay = self._frame_duration - frame_time
        if delay > 0:
            millis = int(delay)
            self._sleep(millis / 1000.0)
            return millis
        return 0

    def _require_screen(self) -> pygame.Surface:
        if self.screen is None:
            raise GraphicsError("Graphics have not been initialized")
        return self.screen

    def clear_screen(self) -> None:
        """Fill the screen with black."""
        self._require_screen().fill((0, 0, 0, 255))

    def draw(self) -> None:
        """Show what has been drawn this frame."""
        self._require_screen()
        pygame.display.flip()

    def create_resource_manager(self) -> ResourceManager:
        """A resource manager bound to this screen."""
        if self.screen is None:
            logger.error("Renderer is not initialized, cannot create ResourceManager")
            raise GraphicsError("Renderer is not initialized, cannot create ResourceManager")
        return ResourceManager(self.screen)

    def close(self) -> None:
        """Close the window and shut pygame down."""
        self.screen = None
        logger.debug("terminating pygame modules")
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        if pygame.font.get_init():
            pygame.font.quit()
        pygame.quit()
        logger.debug(" > pygame - terminated succesfully")