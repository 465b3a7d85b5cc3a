"""Positioned game objects with box collision."""

from __future__ import annotations

import abc
import enum

from pixel_mario.engine import Animation, Image

Vec = tuple[float, float]


class Way(enum.Enum):
    """Horizontal facing."""

    RIGHT = 0
    LEFT = 1


class Object:
    """Something placed in the world, drawn with ``drawable`` and subject to gravity."""

    def __init__(self, drawable=None) -> None:
        self.drawable = drawable
        self.position: Vec = (0.0, 0.0)
        self.scale: Vec = (1.0, 1.0)
        self.pivot: Vec = (0.0, 0.0)
        self.z_index: float = 0.0
        self.visible = True
        self.gravity = 9.8
        self.falling_time = 0.0
        self.falling = False
        self.wants_collision = True

    def scaled_size(self) -> Vec:
        """Drawable size multiplied by scale; negative when mirrored."""
        if self.drawable is None:
            return (0.0, 0.0)
        width, height = self.drawable.size
        return (width * self.scale[0], height * self.scale[1])

    def _half_extent(self) -> Vec:
        width, height = self.scaled_size()
        return (abs(width / 2), abs(height / 2))

    def contains(self, point: Vec) -> bool:
        """True if ``point`` lies inside this object's box, edges included."""
        x, y = self.position
        half_w, half_h = self._half_extent()
        px, py = point
        return x - half_w <= px <= x + half_w and y - half_h <= py <= y + half_h

    def down_collision(self, other: Object) -> bool:
        x, y = self.position
        return other.contains((x, y - self._half_extent()[1] - 2))

    def left_collision(self, other: Object) -> bool:
        x, y = self.position
        return other.contains((x - self._half_extent()[0] - 4, y))

    def right_collision(self, other: Object) -> bool:
        x, y = self.position
        return other.contains((x + self._half_extent()[0] + 4, y))

    def up_collision(self, other: Object) -> bool:
        x, y = self.position
        return other.contains((x, y + self._half_extent()[1] + 2))


class StillObject(Object):
    """An object drawn with a single image."""

    def __init__(self, image_path, size: Vec | None = None) -> None:
        super().__init__(Image(image_path, size))
        self.image_path = str(image_path)


def generate_animation(count: int, path, interval: float, cooldown: float) -> Animation:
    """Build a looping animation from ``path1.png`` .. ``path<count>.png``."""
    paths = [f"{path}{i}.png" for i in range(1, count + 1)]
    return Animation(paths, True, interval, True, cooldown)


class AnimationObject(Object):
    """An object drawn with numbered animation frames."""

    def __init__(self, count: int, path, size: Vec | None = None) -> None:
        self.animation_paths = [f"{path}{i}.png" for i in range(1, count + 1)]
        super().__init__(Animation(self.animation_paths, True, 100, True, 20, size))


class ItemObject(StillObject, abc.ABC):
    """A collectable that hides inside a block until it is released."""

    def __init__(self, position: Vec, image_path, size: Vec | None = None) -> None:
        super().__init__(image_path, size)
        self.position = tuple(position)
        self.spawning = False
        self.inside = True
        self.start_spawning_time = 0.0
        self.way = Way.RIGHT

    @abc.abstractmethod
    def action(self, clock) -> None:
        """Advance the item by one frame."""


class SceneObject(StillObject, abc.ABC):
    """A solid piece of scenery that may hold an item."""

    def __init__(self, image_path, position: Vec, size: Vec | None = None) -> None:
        super().__init__(image_path, size)
        self.position = tuple(position)
        self.got_hit = False
        self.item: ItemObject | None = None

    @abc.abstractmethod
    def hit(self, mario, clock) -> None:
        """React to Mario bumping into the block from below."""