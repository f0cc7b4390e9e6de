"""Game state: the board's entities, input handling and exit state."""

from __future__ import annotations

from typing import Optional

import pygame

from pvzgame import logger
from pvzgame.entities import Plant, Zombie
from pvzgame.graphics import Graphics
from pvzgame.resources import ResourceManager

ROWS = 5
COLS = 10

_EVENT_MESSAGES = {
    pygame.KEYDOWN: "Key pressed",
    pygame.KEYUP: "Key released",
    pygame.MOUSEMOTION: "Mouse moved",
    pygame.MOUSEBUTTONDOWN: "Mouse button pressed",
    pygame.MOUSEBUTTONUP: "Mouse button released",
    pygame.MOUSEWHEEL: "Mouse wheel scrolled",
}


class Game:
    """Holds the plants and zombies on the board and whether play has ended."""

    rows = ROWS
    cols = COLS

    def __init__(self) -> None:
        self.plants: list[Plant] = []
        self.zombies: list[Zombie] = []
        self.graphics: Optional[Graphics] = None
        self.resource_manager: Optional[ResourceManager] = None
        self._exit = False

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event; Escape ends the game."""
        message = _EVENT_MESSAGES.get(event.type)
        if message is None:
            return
        logger.info(message)
        if event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
            self.exit()

    def update(self) -> None:
        """Advance every entity on the board by one tick."""
        for plant in self.plants:
            plant.update()
        for zombie in self.zombies:
            zombie.update()

    def draw(self) -> None:
        """Present the frame; must be called after everything is drawn."""
        if self.graphics is None:
            raise RuntimeError("No graphics set for this game")
        self.graphics.draw()

    def exit(self) -> None:
        """Request the game to end."""
        self._exit = True

    def is_game_over(self) -> bool:
        """Whether the game has been asked to end."""
        if self._exit:
            logger.info("Game Over")
            return True
        return False

    def set_graphics(self, graphics: Graphics) -> None:
        """Attach graphics and create a resource manager bound to them."""
        logger.debug("Setting Graphics")
        if self.resource_manager is not None:
            self.resource_manager.close()
            self.resource_manager = None
        self.graphics = graphics
        logger.debug("Creating ResourceManager")
        self.resource_manager = graphics.create_resource_manager()
        logger.debug("ResourceManager created successfully")

    def close(self) -> None:
        """Release the resource manager."""
        logger.debug("Destroying Game class")
        if self.resource_manager is not None:
            self.resource_manager.close()
            self.resource_manager = None
        logger.debug("Game class destroyed")