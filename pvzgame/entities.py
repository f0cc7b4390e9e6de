"""Board entities: plants and zombies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class PlantType(IntEnum):
    """Kinds of plant."""

    PEASHOOTER = 0
    SUNFLOWER = 1
    CHERRY_BOMB = 2
    WALL_NUT = 3
    POTATO_MINE = 4
    SNOW_PEA = 5
    CHOMPER = 6
    REPEATER = 7
    PUFF_SHROOM = 8
    SUN_SHROOM = 9
    FUME_SHROOM = 10
    GRAVE_BUSTER = 11
    HYPNO_SHROOM = 12
    SCAREDY_SHROOM = 13
    ICE_SHROOM = 14
    DOOM_SHROOM = 15
    LILY_PAD = 16
    SQUASH = 17
    THREEPEATER = 18
    TANGLE_KELP = 19
    JALAPENO = 20
    SPIKEWEED = 21
    TORCHWOOD = 22
    TALL_NUT = 23
    SEA_SHROOM = 24
    PLANTERN = 25
    CACTUS = 26
    BLOVER = 27
    SPLIT_PEA = 28
    STARFRUIT = 29
    PUMPKIN = 30
    MAGNET_SHROOM = 31
    CABBAGE_PULT = 32
    FLOWER_POT = 33
    KERNEL_PULT = 34
    COFFEE_BEAN = 35
    GARLIC = 36
    UMBRELLA_LEAF = 37
    MARIGOLD = 38
    MELON_PULT = 39
    GATLING_PEA = 40
    TWIN_SUNFLOWER = 41
    GLOOM_SHROOM = 42
    CATTAIL = 43
    WINTER_MELON = 44
    GOLD_MAGNET = 45
    SPIKEROCK = 46
    COB_CANNON = 47


class ZombieType(IntEnum):
    """Kinds of zombie."""

    REGULAR_ZOMBIE = 0
    FLAG_ZOMBIE = 1
    CONEHEAD_ZOMBIE = 2
    POLE_VAULTING_ZOMBIE = 3
    BUCKETHEAD_ZOMBIE = 4
    NEWSPAPER_ZOMBIE = 5
    SCREEN_DOOR_ZOMBIE = 6
    FOOTBALL_ZOMBIE = 7
    DANCING_ZOMBIE = 8
    BACKUP_DANCER = 9
    DUCKY_TUBE_ZOMBIE = 10
    SNORKEL_ZOMBIE = 11
    ZOMBONI = 12
    POGO_ZOMBIE = 13
    BUNGEE_ZOMBIE = 14
    LADDER_ZOMBIE = 15
    CATAPULT_ZOMBIE = 16
    GARGANTUAR = 17
    IMP = 18


@dataclass
class Entity(ABC):
    """Something that occupies a cell on the board."""

    row: int
    col: int
    health: int

    symbol: ClassVar[str]

    @abstractmethod
    def update(self) -> None:
        """Advance the entity by one tick."""


@dataclass
class Plant(Entity):
    """A plant with a shooting cooldown that counts down each tick."""

    health: int = 5
    shoot_cooldown: int = 0

    symbol: ClassVar[str] = "P"

    def update(self) -> None:
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1


@dataclass
class Zombie(Entity):
    """A zombie that walks one column to the left each tick."""

    health: int = 10

    symbol: ClassVar[str] = "Z"

    def update(self) -> None:
        self.col -= 1