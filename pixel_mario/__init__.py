"""A side-scrolling platformer: game objects, levels, physics and a pygame window loop."""

__version__ = "0.1.0"