"""A Plants vs. Zombies style game skeleton on pygame: entities, reanim animation reading, textures, resources and a frame-paced game loop."""

__version__ = "0.1.0"