# pvzgame

A Plants vs. Zombies style game skeleton built on pygame. It contains:

- `pvzgame.logger`: coloured, timestamped terminal log records that name the
  calling file, function and line (`error`, `warning`/`warn`, `info`,
  `debug`, `fatal`, `log`), plus ANSI escape helpers (`escape`,
  `set_terminal`, `TermCmd`, `TermColor`).
- `pvzgame.entities`: `Plant` and `Zombie` on a board, and the `PlantType`
  and `ZombieType` enumerations.
- `pvzgame.animation`: a reader for `.reanim` animation files
  (`read_animation`, `parse_animation`), giving an `Animation` made of
  `AnimationTrack`s of `AnimationFrame`s.
- `pvzgame.texture`: `Texture`, an image loaded with pygame and drawn with
  colour, alpha and blend settings; pixels of colour (0, 255, 255) are
  transparent.
- `pvzgame.resources`: `ResourceManager`, a cache of textures keyed by path;
  only one open manager may exist at a time.
- `pvzgame.graphics`: `Graphics`, which starts pygame, opens the window and
  paces frames to a target FPS (60 by default).
- `pvzgame.game` and `pvzgame.app`: the `Game` object and the main loop.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Commands

Start the game. It opens a full-screen window; press Escape or close the
window to quit.

```
pvzgame
pvzgame --windowed --width 1024 --height 768 --fps 30
pvzgame --frames 600          # stop after 600 frames
```

Load an animation file and list the images it refers to (the default path is
`resources/fire.reanim`). The exit status is 1 if the file cannot be read.

```
pvzgame-animcheck resources/fire.reanim
```

Show images one per frame, centred in a 640×480 window on a white
background, until the window is closed. With no paths it uses
`resources/Diamond.png` and `resources/Diamond_shine1.png` to
`resources/Diamond_shine5.png`.

```
pvzgame-spritedemo resources/Diamond.png resources/Diamond_shine1.png
pvzgame-spritedemo --frames 120 a.png b.png
```

## Using the library

```python
from pvzgame.animation import read_animation

animation = read_animation("resources/fire.reanim")
print(animation.name, animation.fps, animation.frame_count, animation.duration)
for image in animation.required_resources():
    print(image)
```

Each `<t>` frame of a track starts from the values of the frame before it and
changes only the fields it names (`x`, `y`, `sx`, `sy`, `kx`, `ky`, `a` for
opacity, `f` of -1 for hidden, `i` for the image). Only the first `<track>`
after `<fps>` is read.

```python
from pvzgame.entities import Plant, Zombie

zombie = Zombie(2, 9)   # health 10
zombie.update()         # col is now 8
plant = Plant(2, 0, shoot_cooldown=3)
plant.update()          # shoot_cooldown is now 2
print(plant.symbol, zombie.symbol)   # P Z
```

```python
import pygame
from pvzgame.resources import ResourceManager

pygame.init()
screen = pygame.display.set_mode((640, 480))
with ResourceManager(screen) as manager:
    texture = manager.load_resource("resources/Diamond.png")
    texture.set_alpha(128)
    texture.render(screen, 10, 10)
```

## Errors

- `AnimationError`: the file is missing or not well-formed, has no `<fps>`,
  has no track, or a track lacks `<name>` or `<t>` elements; also when tracks
  are loaded twice or disagree in length.
- `TextureError`: an image cannot be loaded, or an unloaded texture is drawn.
- `ResourceError`: a second manager is opened while one is open, a path is
  loaded twice, or a closed manager is used.
- `GraphicsError`: pygame's display cannot start, the window cannot be
  opened, or the screen is used before it is.

## What it does not do

There is no gameplay yet. `Game` holds lists of plants and zombies and
advances them each frame, but nothing places them on the board and nothing
is drawn: the game window shows a black screen and logs the key and mouse
events it receives. Animations are read but not played or drawn, and no
sound is played.