"""The player character in its small and big forms."""

from __future__ import annotations

import abc
import enum

from pixel_mario.engine import RESOURCE_DIR, Animation, Key
from pixel_mario.objects import AnimationObject, Vec, generate_animation

MARIO_DIR = RESOURCE_DIR / "image" / "character" / "mario"
_SMALL_DIR = MARIO_DIR / "small"
_BIG_DIR = MARIO_DIR / "big"
_MOVE_KEYS = (Key.S, Key.W, Key.A, Key.D)

LEFT_EDGE = -620.0
MAX_SPEED = 4.0


class MarioForm(enum.Enum):
    """Power-up form of Mario."""

    SMALL = 0
    BIG = 1
    FIRE = 2


class SmallAction(enum.IntEnum):
    RUN = 0
    JUMP = 1
    STAND = 2
    STOP = 3
    SMALL_TO_BIG = 4
    DIE = 5


class BigAction(enum.IntEnum):
    RUN = 0
    JUMP = 1
    STAND = 2
    STOP = 3
    DOWN = 4
    BIG_TO_SMALL = 5


def _no_move_key(keys) -> bool:
    return not any(keys.is_pressed(key) for key in _MOVE_KEYS)


class Mario(AnimationObject, abc.ABC):
    """Common movement for every form of Mario."""

    form = MarioForm.SMALL

    def __init__(self, size: Vec | None = None) -> None:
        super().__init__(1, _SMALL_DIR / "stand" / "small_stand", size)
        self._frame_size = size
        self.current_state = 2
        self.acceleration = 0.0

    def _animation(self, count: int, path, interval: float, cooldown: float) -> Animation:
        animation = generate_animation(count, path, interval, cooldown)
        if self._frame_size is not None:
            animation.size = self._frame_size
        return animation

    def _shift(self) -> None:
        x, y = self.position
        self.position = (x + self.acceleration, y)

    def right_move(self) -> None:
        """Speed up to the right, or brake harder when still moving left."""
        if 0.0 <= self.acceleration <= MAX_SPEED:
            self.acceleration = min(self.acceleration + 0.1, MAX_SPEED)
            self.scale = (1.35, 1.2)
            self.current_state = 0
        elif self.acceleration < 0:
            self.acceleration += 0.2
            self.current_state = 3
            self.scale = (1.35, 1.2)
        self._shift()

    def left_move(self) -> None:
        """Speed up to the left, never passing the left edge of the screen."""
        x, y = self.position
        if x - 1 <= LEFT_EDGE:
            self.position = (LEFT_EDGE, y)
        elif -MAX_SPEED <= self.acceleration <= 0.0:
            self.acceleration = max(self.acceleration - 0.1, -MAX_SPEED)
            self.scale = (-1.35, 1.2)
            self.current_state = 0
        else:
            self.acceleration -= 0.2
            self.current_state = 3
            self.scale = (-1.35, 1.2)
        self._shift()

    def jump(self) -> None:
        """Leave the ground unless already in the air."""
        if not self.falling:
            x, y = self.position
            self.position = (x, y + 4)
            self.gravity = -7.5

    def brakes(self, keys) -> None:
        """Slow down gradually while no movement key is held."""
        if not _no_move_key(keys):
            return
        if self.acceleration >= 0.07:
            self.acceleration -= 0.07
            self._shift()
        elif self.acceleration <= -0.02:
            self.acceleration += 0.07
            self._shift()
        else:
            self.acceleration = 0.0

    @abc.abstractmethod
    def update_current_state(self, num: int) -> None:
        """Switch to the state numbered ``num``."""

    @abc.abstractmethod
    def hurt(self) -> None:
        """React to touching an enemy."""

    @abc.abstractmethod
    def update(self, keys, clock) -> None:
        """Advance one frame from the keyboard state."""


class SmallMario(Mario):
    """Mario before any power-up."""

    form = MarioForm.SMALL

    def __init__(self, size: Vec | None = None) -> None:
        super().__init__(size)
        self.frames = {
            SmallAction.STAND: self._animation(1, _SMALL_DIR / "stand" / "small_stand", 400, 100),
            SmallAction.RUN: self._animation(3, _SMALL_DIR / "run" / "small_run", 90, 60),
            SmallAction.JUMP: self._animation(1, _SMALL_DIR / "jump" / "small_jump", 400, 100),
            SmallAction.DIE: self._animation(1, _SMALL_DIR / "die" / "die", 400, 100),
            SmallAction.SMALL_TO_BIG: self._animation(
                3, _SMALL_DIR / "SmalltoBig" / "SmalltoBig", 800, 200
            ),
            SmallAction.STOP: self._animation(1, _SMALL_DIR / "stop" / "small_stop", 400, 100),
        }
        self.scale = (1.4, 1.4)

    def hurt(self) -> None:
        self.update_current_state(SmallAction.DIE)

    def update_current_state(self, num: int) -> None:
        """Show the animation for state ``num``; unknown states are ignored."""
        frames = self.frames.get(num)
        if frames is not None:
            self.drawable = frames

    def update(self, keys, clock) -> None:
        if keys.is_pressed(Key.D):
            self.right_move()
            self.update_current_state(self.current_state)
        elif keys.is_pressed(Key.A):
            self.left_move()
            self.update_current_state(self.current_state)

        if keys.is_pressed(Key.W):
            self.jump()
            self.current_state = SmallAction.JUMP
            self.update_current_state(self.current_state)

        if keys.is_pressed(Key.SPACE):
            x, y = self.position
            print(f"{x} {y} {clock.delta_time()}")

        self.brakes(keys)
        if self.acceleration == 0:
            self.current_state = SmallAction.STAND
            self.update_current_state(self.current_state)


_BIG_STATES = {0: 0, 1: 1, 2: 3, 3: 3, 4: 4, 5: 5}


class BigMario(Mario):
    """Mario after eating a mushroom."""

    form = MarioForm.BIG

    def __init__(self, size: Vec | None = None) -> None:
        super().__init__(size)
        self.frames = {
            BigAction.STAND: self._animation(1, _BIG_DIR / "stand" / "stand", 100, 100),
            BigAction.RUN: self._animation(3, _BIG_DIR / "run" / "big_run", 200, 100),
            BigAction.JUMP: self._animation(1, _SMALL_DIR / "jump" / "small_jump", 100, 100),
            BigAction.BIG_TO_SMALL: self._animation(
                3, _BIG_DIR / "BigToSmall" / "big_to_small", 800, 200
            ),
            BigAction.DOWN: self._animation(1, _BIG_DIR / "Down" / "big_down", 800, 200),
            BigAction.STOP: self._animation(1, _BIG_DIR / "stop" / "big_stop", 800, 200),
        }

    def hurt(self) -> None:
        """Big Mario is not affected yet."""

    def update_current_state(self, num: int) -> None:
        """Record state ``num``; standing is recorded as stopping."""
        state = _BIG_STATES.get(num)
        if state is not None:
            self.current_state = state

    def update(self, keys, clock) -> None:
        if keys.is_pressed(Key.D):
            self.right_move()
            self.update_current_state(BigAction.RUN)
        if keys.is_pressed(Key.A):
            self.left_move()
            self.update_current_state(BigAction.RUN)
        if _no_move_key(keys):
            self.update_current_state(BigAction.STAND)