"""Small runtime layer: images, animations, clock, keyboard state and rendering."""

from __future__ import annotations

import enum
import functools
import os
import time
from pathlib import Path
from typing import Callable, Iterable, Sequence

RESOURCE_DIR = Path(os.environ.get("PIXEL_MARIO_RESOURCES", "Resources"))


class Key(enum.Enum):
    """Keys the game reacts to."""

    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    SPACE = enum.auto()
    RETURN = enum.auto()
    KP_ENTER = enum.auto()
    ESCAPE = enum.auto()


@functools.lru_cache(maxsize=None)
def _load_surface(path: str):
    import pygame

    return pygame.image.load(path)


class Image:
    """A still picture stored at ``path``; its size is read from the file on demand."""

    def __init__(self, path, size: tuple[float, float] | None = None) -> None:
        self.path = str(path)
        self._size = tuple(size) if size is not None else None

    @property
    def size(self) -> tuple[float, float]:
        if self._size is None:
            self._size = _load_surface(self.path).get_size()
        return self._size

    @size.setter
    def size(self, value: tuple[float, float]) -> None:
        self._size = tuple(value)

    def current_path(self, elapsed_ms: float) -> str:
        """The image shown at any moment is always the same file."""
        return self.path


class Animation:
    """A sequence of frames shown ``interval`` ms apart, pausing ``cooldown`` ms between loops."""

    def __init__(
        self,
        paths: Sequence,
        play: bool = True,
        interval: float = 100,
        looping: bool = True,
        cooldown: float = 20,
        size: tuple[float, float] | None = None,
    ) -> None:
        if not paths:
            raise ValueError("an animation needs at least one frame")
        if interval <= 0:
            raise ValueError("frame interval must be positive")
        if cooldown < 0:
            raise ValueError("cooldown must not be negative")
        self.paths = tuple(str(p) for p in paths)
        self.playing = play
        self.interval = interval
        self.looping = looping
        self.cooldown = cooldown
        self._size = tuple(size) if size is not None else None

    @property
    def size(self) -> tuple[float, float]:
        if self._size is None:
            self._size = _load_surface(self.paths[0]).get_size()
        return self._size

    @size.setter
    def size(self, value: tuple[float, float]) -> None:
        self._size = tuple(value)

    def current_path(self, elapsed_ms: float) -> str:
        """Return the frame to show ``elapsed_ms`` milliseconds after the start."""
        if not self.playing:
            return self.paths[0]
        t = max(0.0, float(elapsed_ms))
        if self.looping:
            t %= len(self.paths) * self.interval + self.cooldown
        index = min(int(t // self.interval), len(self.paths) - 1)
        return self.paths[index]


class Clock:
    """Frame clock; values change only when :meth:`tick` is called."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._source = time_source
        self._start = time_source()
        self._last = self._start
        self._elapsed_ms = 0.0
        self._delta = 0.0

    def elapsed_ms(self) -> float:
        """Milliseconds from creation to the latest tick."""
        return self._elapsed_ms

    def delta_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta

    def tick(self) -> None:
        now = self._source()
        self._delta = now - self._last
        self._last = now
        self._elapsed_ms = (now - self._start) * 1000.0


class Input:
    """Keyboard state for the current frame."""

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._released: set[Key] = set()
        self.quit_requested = False

    def press(self, key: Key) -> None:
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)
        self._released.add(key)

    def is_pressed(self, key: Key) -> bool:
        return key in self._held

    def is_released(self, key: Key) -> bool:
        """True if ``key`` went up during this frame."""
        return key in self._released

    def end_frame(self) -> None:
        self._released.clear()


class Renderer:
    """Keeps drawable children and paints them in z order."""

    def __init__(self, children: Iterable = ()) -> None:
        self.children = list(children)

    def add_child(self, child) -> None:
        self.children.append(child)

    def update(self) -> list:
        """Visible children, lowest z index first."""
        return sorted(
            (child for child in self.children if child.visible),
            key=lambda child: child.z_index,
        )

    def draw(self, surface, clock: Clock) -> None:
        """Paint visible children onto ``surface``; world origin is the centre, y points up."""
        import pygame

        width, height = surface.get_size()
        for child in self.update():
            image = _load_surface(child.drawable.current_path(clock.elapsed_ms()))
            img_w, img_h = image.get_size()
            sx, sy = child.scale
            target_w = round(abs(img_w * sx))
            target_h = round(abs(img_h * sy))
            if target_w == 0 or target_h == 0:
                continue
            frame = pygame.transform.scale(image, (target_w, target_h))
            if sx < 0 or sy < 0:
                frame = pygame.transform.flip(frame, sx < 0, sy < 0)
            px, py = child.position
            pivot_x, pivot_y = getattr(child, "pivot", (0.0, 0.0))
            cx = px - pivot_x * sx
            cy = py - pivot_y * sy
            left = round(width / 2 + cx - target_w / 2)
            top = round(height / 2 - cy - target_h / 2)
            surface.blit(frame, (left, top))