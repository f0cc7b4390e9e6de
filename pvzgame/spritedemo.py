"""A window that cycles through a list of images to check resource loading."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from pvzgame import logger
from pvzgame.resources import ResourceError, ResourceManager
from pvzgame.texture import TextureError

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
FPS = 60
BACKGROUND = (0xFF, 0xFF, 0xFF, 0xFF)

DEFAULT_PATHS = (
    "resources/Diamond.png",
    "resources/Diamond_shine1.png",
    "resources/Diamond_shine2.png",
    "resources/Diamond_shine3.png",
    "resources/Diamond_shine4.png",
    "resources/Diamond_shine5.png",
)


def _half(value: int) -> int:
    # Halve with truncation toward zero.
    return -((-value) // 2) if value < 0 else value // 2


def centered_position(screen_size: tuple[int, int], texture_size: tuple[int, int]) -> tuple[int, int]:
    """Top-left corner that centres an image of ``texture_size`` on the screen."""
    (screen_w, screen_h), (tex_w, tex_h) = screen_size, texture_size
    return _half(screen_w - tex_w), _half(screen_h - tex_h)


def run(
    screen: pygame.Surface,
    manager: ResourceManager,
    paths: Sequence[str],
    max_frames: Optional[int] = None,
) -> int:
    """Show the images at ``paths`` in turn, one per frame, until quit.

    Returns the number of frames drawn.
    """
    paths = list(paths)
    clock = pygame.time.Clock()
    frames = 0
    quit_requested = False
    while not quit_requested:
        if max_frames is not None and frames >= max_frames:
            break
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True

        screen.fill(BACKGROUND)
        if paths:
            path = paths[frames % len(paths)]
            texture = manager.get_resource(path)
            if texture is None:
                raise ResourceError(f"{path} - Resource not loaded")
            x, y = centered_position(screen.get_size(), (texture.width, texture.height))
            texture.render(screen, x, y)
        if screen is pygame.display.get_surface():
            pygame.display.flip()

        frames += 1
        pygame.event.clear()
        clock.tick(FPS)
    return frames


def main(argv: Optional[list[str]] = None) -> int:
    """Open a window and cycle through the given images."""
    parser = argparse.ArgumentParser(description="Cycle through images in a window.")
    parser.add_argument("paths", nargs="*", help="images to show")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)
    paths = args.paths or list(DEFAULT_PATHS)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Sprite demo")
        with ResourceManager(screen) as manager:
            for path in paths:
                manager.load_resource(path)
            run(screen, manager, paths, args.frames)
    except (pygame.error, TextureError, ResourceError) as exc:
        logger.error("Failed to initialize! %s", exc)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())