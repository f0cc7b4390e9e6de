"""The game's main loop and its command."""

from __future__ import annotations

import argparse
from typing import Optional

import pygame

from pvzgame import logger
from pvzgame.game import Game
from pvzgame.graphics import Graphics, GraphicsError


def run(game: Game, graphics: Graphics, max_frames: Optional[int] = None) -> int:
    """Run frames until the game is over or ``max_frames`` have passed.

    One pending event is handled per frame and the rest are discarded.
    Returns the number of frames run.
    """
    frames = 0
    while not game.is_game_over():
        if max_frames is not None and frames >= max_frames:
            break
        graphics.frame_start()

        event = pygame.event.poll()
        if event.type != pygame.NOEVENT:
            if event.type == pygame.QUIT:
                logger.info("User requested quit")
                game.exit()
            game.handle_event(event)

        graphics.clear_screen()
        game.update()
        game.draw()

        pygame.event.clear()
        graphics.frame_end()
        frames += 1
    logger.info("Game loop ended")
    return frames


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and play until the user quits."""
    parser = argparse.ArgumentParser(description="Plants Vs. Zombies.")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument("--width", type=int, default=0, help="window width (0: desktop)")
    parser.add_argument("--height", type=int, default=0, help="window height (0: desktop)")
    parser.add_argument("--fps", type=int, default=60, help="target frames per second")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    game = Game()
    graphics = Graphics(target_fps=args.fps)
    try:
        graphics.init_sdl()
        graphics.init_graphics((args.width, args.height), fullscreen=not args.windowed)
        game.set_graphics(graphics)
        run(game, graphics, args.frames)
    except GraphicsError as exc:
        logger.fatal("%s", exc)
        return 1
    finally:
        logger.debug("cleaning up")
        game.close()
        graphics.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())