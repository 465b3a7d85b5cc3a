"""Enemies that walk along the level."""

from __future__ import annotations

import abc

from pixel_mario.engine import RESOURCE_DIR
from pixel_mario.objects import AnimationObject, StillObject, Vec, Way

MONSTER_DIR = RESOURCE_DIR / "image" / "character" / "monster"


class Monster(AnimationObject, abc.ABC):
    """An animated enemy facing left or right."""

    def __init__(self, count: int, path, size: Vec | None = None) -> None:
        super().__init__(count, path, size)
        self.way = Way.RIGHT
        self.dead = False
        self.die_timer = 0.0

    def set_way(self, way: Way) -> None:
        """Face ``way`` and mirror the sprite to match."""
        self.way = way
        if way is Way.RIGHT:
            self.scale = (1.2, 1.2)
        elif way is Way.LEFT:
            self.scale = (-1.2, 1.2)

    def _walk(self, step: float) -> None:
        x, y = self.position
        if self.way is Way.LEFT:
            self.position = (x - step, y)
        elif self.way is Way.RIGHT:
            self.position = (x + step, y)

    @abc.abstractmethod
    def action(self, clock) -> None:
        """Advance the monster by one frame."""

    @abc.abstractmethod
    def hurt(self, clock) -> None:
        """React to being stomped."""


class Mushroom(Monster):
    """Walking mushroom that is squashed when stomped and then removed."""

    def __init__(self, position: Vec, way: Way, size: Vec | None = None) -> None:
        path = MONSTER_DIR / "mushroom"
        super().__init__(2, path / "mushroom_walk", size)
        self.walk_look = AnimationObject(2, path / "mushroom_walk", size)
        self.die_look = AnimationObject(1, path / "mushroom_die", size)
        self.set_way(way)
        self.z_index = 100
        self.position = tuple(position)

    def action(self, clock) -> None:
        if not self.dead:
            self._walk(1.5)
        elif clock.elapsed_ms() - self.die_timer >= 1000.0:
            x, y = self.position
            self.position = (x, y - 500)

    def hurt(self, clock) -> None:
        self.drawable = self.die_look.drawable
        self.dead = True
        self.die_timer = clock.elapsed_ms()


class Turtle(Monster):
    """Slow walking turtle."""

    def __init__(self, count: int, path, size: Vec | None = None) -> None:
        super().__init__(count, path, size)
        turtle_dir = MONSTER_DIR / "turtle"
        self.walk_look = AnimationObject(2, turtle_dir / "walk", size)
        self.die_look = StillObject(turtle_dir / "die1.png", size)

    def action(self, clock) -> None:
        self._walk(1.0)

    def hurt(self, clock) -> None:
        self.drawable = self.die_look.drawable