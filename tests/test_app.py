import os

import pygame
import pytest

from pvzgame.app import main, run
from pvzgame.game import Game

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeGraphics:
    def __init__(self):
        self.calls = []

    def frame_start(self):
        self.calls.append("frame_start")

    def clear_screen(self):
        self.calls.append("clear_screen")

    def draw(self):
        self.calls.append("draw")

    def frame_end(self):
        self.calls.append("frame_end")


@pytest.fixture
def display():
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


@pytest.fixture
def setup():
    game = Game()
    graphics = FakeGraphics()
    game.graphics = graphics
    return game, graphics


def test_run_stops_after_max_frames(display, setup):
    game, graphics = setup
    assert run(game, graphics, 2) == 2
    assert graphics.calls == ["frame_start", "clear_screen", "draw", "frame_end"] * 2
    assert game.is_game_over() is False


def test_run_does_nothing_when_game_already_over(display, setup):
    game, graphics = setup
    game.exit()
    assert run(game, graphics, 5) == 0
    assert graphics.calls == []


def test_quit_event_ends_loop_after_finishing_frame(display, setup):
    game, graphics = setup
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert run(game, graphics, 10) == 1
    assert game.is_game_over() is True
    assert graphics.calls[-1] == "frame_end"


def test_escape_event_ends_loop(display, setup):
    game, graphics = setup
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert run(game, graphics, 10) == 1
    assert game.is_game_over() is True


def test_main_runs_windowed_for_given_frames():
    assert main(["--windowed", "--width", "64", "--height", "48", "--frames", "2"]) == 0
    assert pygame.get_init() is False