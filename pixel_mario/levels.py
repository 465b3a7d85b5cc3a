"""Playable levels: scenery layout, monster spawns and the per-frame loop."""

from __future__ import annotations

import abc

from pixel_mario.engine import RESOURCE_DIR, Key, Renderer
from pixel_mario.managers import (
    BlockType,
    GravityManager,
    MapManager,
    RewardType,
    add_monsters,
    update_world,
)
from pixel_mario.mario import SmallMario
from pixel_mario.monsters import Mushroom
from pixel_mario.objects import StillObject, Vec, Way

LEVEL1_BACKGROUND = RESOURCE_DIR / "image" / "Background" / "Level1" / "level_1.png"

MARIO_START: Vec = (-620, -150)
MARIO_Z_INDEX = 50
MARIO_SCALE: Vec = (1.35, 1.2)
SCROLL_STEP = 4
RESCUE_BACKGROUND_X = 500
RESCUE_MARIO_Y = -350


class Level(abc.ABC):
    """A level with its renderer, Mario, scenery, monsters and items."""

    def __init__(self, background: StillObject | None = None, sprite_size: Vec | None = None) -> None:
        self.renderer = Renderer()
        self.sprite_size = sprite_size
        self.mario = SmallMario(sprite_size)
        self.background = background
        self.scenes: list = []
        self.monsters: list = []
        self.items: list = []
        self.map_manager: MapManager | None = None
        self.gravity_manager = GravityManager(self.scenes)
        self.condition_num = 1

    def start(self) -> None:
        """Put Mario at the start and register everything with the renderer."""
        self.mario.position = MARIO_START
        self.mario.update_current_state(2)
        self.mario.z_index = MARIO_Z_INDEX
        self.mario.scale = MARIO_SCALE
        if self.background is not None:
            self.renderer.add_child(self.background)
        self.renderer.add_child(self.mario)
        for scene in self.scenes:
            self.renderer.add_child(scene)
        for item in self.items:
            self.renderer.add_child(item)

    @staticmethod
    def _shift_left(obj) -> None:
        x, y = obj.position
        obj.position = (x - SCROLL_STEP, y)

    def move_objects(self) -> None:
        """Scroll the world once Mario passes the middle of the screen."""
        if self.mario.position[0] >= 0:
            if self.background is not None:
                self._shift_left(self.background)
            self._shift_left(self.mario)
            for obj in (*self.monsters, *self.scenes, *self.items):
                self._shift_left(obj)
        if (
            self.background is not None
            and self.background.position[0] <= RESCUE_BACKGROUND_X
            and self.mario.position[1] <= RESCUE_MARIO_Y
        ):
            self.mario.position = (self.mario.position[0], 0)

    @abc.abstractmethod
    def check_spawns(self) -> None:
        """Add the monsters that appear at the current scroll position."""

    def update(self, keys, clock) -> None:
        """Advance the level by one frame."""
        self.move_objects()
        self.mario.update(keys, clock)
        if keys.is_pressed(Key.SPACE) and self.background is not None:
            print(self.background.position[0])
        self.check_spawns()
        update_world(self.mario, self.monsters, self.scenes, self.items, clock)
        self.renderer.update()
        self.gravity_manager.update(self.mario, self.monsters, self.items, clock)


_LUCKY_BLOCKS = (
    (16.5, -9.5), (22.5, -5.5), (21.5, -9.5), (23.5, -9.5), (78.5, -9.5), (94.5, -5.5),
    (106.5, -9.5), (109.5, -9.5), (109.5, -5.5), (112.5, -9.5), (129.5, -5.5),
    (130.5, -5.5), (170.5, -9.5),
)
_ORIGINAL_BLOCKS = (
    (20.5, -9.5), (22.5, -9.5), (24.5, -9.5), (77.5, -9.5), (79.5, -9.5), (80.5, -5.5),
    (81.5, -5.5), (82.5, -5.5), (83.5, -5.5), (84.5, -5.5), (85.5, -5.5), (86.5, -5.5),
    (87.5, -5.5), (91.5, -5.5), (92.5, -5.5), (93.5, -5.5), (100.5, -9.5), (118.5, -9.5),
    (121.5, -5.5), (122.5, -5.5), (123.5, -5.5), (128.5, -5.5), (129.5, -9.5),
    (130.5, -9.5), (131.5, -5.5), (168.5, -9.5), (169.5, -9.5), (171.5, -9.5),
)
_FOOT_BLOCKS = (
    (134.5, -12.5), (135.5, -12.5), (135.5, -11.5), (136.5, -12.5), (136.5, -11.5),
    (136.5, -10.5), (137.5, -12.5), (137.5, -11.5), (137.5, -10.5), (137.5, -9.5),
    (143.5, -12.5), (142.5, -12.5), (142.5, -11.5), (141.5, -12.5), (141.5, -11.5),
    (141.5, -10.5), (140.5, -12.5), (140.5, -11.5), (140.5, -10.5), (140.5, -9.5),
    (148.5, -12.5), (149.5, -12.5), (150.5, -12.5), (151.5, -12.5), (152.5, -12.5),
    (149.5, -11.5), (150.5, -11.5), (151.5, -11.5), (152.5, -11.5), (150.5, -10.5),
    (151.5, -10.5), (152.5, -10.5), (151.5, -9.5), (152.5, -9.5), (158.5, -12.5),
    (157.5, -12.5), (156.5, -12.5), (155.5, -12.5), (157.5, -11.5), (156.5, -11.5),
    (155.5, -11.5), (156.5, -10.5), (155.5, -10.5), (155.5, -9.5),
    (181.5, -12.5), (182.5, -12.5), (183.5, -12.5), (184.5, -12.5), (185.5, -12.5),
    (186.5, -12.5), (187.5, -12.5), (188.5, -12.5), (189.5, -12.5), (182.5, -11.5),
    (183.5, -11.5), (184.5, -11.5), (185.5, -11.5), (186.5, -11.5), (187.5, -11.5),
    (188.5, -11.5), (189.5, -11.5), (183.5, -10.5), (184.5, -10.5), (185.5, -10.5),
    (186.5, -10.5), (187.5, -10.5), (188.5, -10.5), (189.5, -10.5), (184.5, -9.5),
    (185.5, -9.5), (186.5, -9.5), (187.5, -9.5), (188.5, -9.5), (189.5, -9.5),
    (185.5, -8.5), (186.5, -8.5), (187.5, -8.5), (188.5, -8.5), (189.5, -8.5),
    (186.5, -7.5), (187.5, -7.5), (188.5, -7.5), (189.5, -7.5), (187.5, -6.5),
    (188.5, -6.5), (189.5, -6.5), (188.5, -5.5), (189.5, -5.5), (189.5, -4.5),
)
_FLOOR_GAPS = (69.5, 70.5, 86.5, 87.5, 88.5, 153.5, 154.5)
_FLOOR_Y = -13.5
_PIPES_64_64 = ((29, -12), (164, -12), (180, -12))
_PIPES_64_96 = ((39, -11.5),)
_PIPES_64_128 = ((47, -11), (58, -11))
_COINS = (
    (16.5, -9.5), (22.5, -5.5), (23.5, -9.5), (94.5, -5.5), (94.5, -9.5), (106.5, -9.5),
    (109.5, -9.5), (112.5, -9.5), (129.5, -5.5), (130.5, -5.5), (170.5, -9.5),
)

# Background x at which each wave of mushrooms appears, with their positions.
_SPAWNS = (
    (-600, ((600, -220),)),
    (-1050, ((1000, -220),)),
    (-1630, ((900, -220), (960, -220))),
    (-3000, ((1000, 140), (1050, 140))),
    (-3900, ((700, -247), (775, -247))),
)


class Level1(Level):
    """World 1-1."""

    def __init__(self, background_size: Vec | None = None, sprite_size: Vec | None = None) -> None:
        background = StillObject(LEVEL1_BACKGROUND, background_size)
        background.scale = (1.5, 1.5)
        background.pivot = (-3584, 240)
        background.position = (-640, 360)
        background.z_index = 1
        super().__init__(background, sprite_size)

        self.map_manager = MapManager(background.position, background.scaled_size(), sprite_size)
        self.map_manager.set_floor(self.scenes, _FLOOR_GAPS, _FLOOR_Y)
        for positions, block_type in (
            (_LUCKY_BLOCKS, BlockType.LUCKY_BLOCK),
            (_ORIGINAL_BLOCKS, BlockType.ORIGINAL_BLOCK),
            (_FOOT_BLOCKS, BlockType.FOOT_BLOCK),
            (_PIPES_64_64, BlockType.PIPE_64_64),
            (_PIPES_64_96, BlockType.PIPE_64_96),
            (_PIPES_64_128, BlockType.PIPE_64_128),
        ):
            self.map_manager.set_block(self.scenes, positions, block_type)
        self.map_manager.set_item(self.scenes, self.items, _COINS, RewardType.ITEM_COIN)

        self.gravity_manager = GravityManager(self.scenes)

    def check_spawns(self) -> None:
        stage = self.condition_num - 1
        if not 0 <= stage < len(_SPAWNS):
            return
        threshold, positions = _SPAWNS[stage]
        if self.background.position[0] <= threshold:
            wave = [Mushroom(position, Way.LEFT, self.sprite_size) for position in positions]
            add_monsters(wave, self.renderer, self.monsters)
            self.condition_num += 1


class Level2(Level):
    """Empty second level."""

    def check_spawns(self) -> None:
        """No monsters appear in this level."""


class Level3(Level):
    """Empty third level."""

    def check_spawns(self) -> None:
        """No monsters appear in this level."""


_LEVELS = {1: Level1, 2: Level2, 3: Level3}


def create_level(number: int) -> Level:
    """Build the level numbered ``number`` (1 to 3)."""
    try:
        level_class = _LEVELS[number]
    except KeyError:
        raise ValueError(f"there is no level {number}") from None
    return level_class()