"""Level construction, gravity and collision handling."""

from __future__ import annotations

import enum
import itertools
from typing import Iterable

from pixel_mario.blocks import (
    AirBlock,
    FootBlock,
    LuckyBlock,
    OriginalBlock,
    Pipe64x64,
    Pipe64x96,
    Pipe64x128,
)
from pixel_mario.items import CoinItem
from pixel_mario.monsters import Monster
from pixel_mario.objects import ItemObject, Object, SceneObject, Vec, Way

TILE = 48
SCENE_Z_INDEX = 100
SCENE_SCALE: Vec = (1.5, 1.5)
GRAVITY = 9.5


class BlockType(enum.Enum):
    """Kinds of scenery a map can place."""

    LUCKY_BLOCK = 0
    ORIGINAL_BLOCK = 1
    FOOT_BLOCK = 2
    PIPE_64_64 = 3
    PIPE_64_96 = 4
    PIPE_64_128 = 5
    AIR_BLOCK = 6


class RewardType(enum.Enum):
    """Kinds of item a block can hold."""

    ITEM_MUSHROOM = 0
    ITEM_FIRE_FLOWER = 1
    ITEM_STAR = 2
    ITEM_COIN = 3


_BLOCK_CLASSES = {
    BlockType.LUCKY_BLOCK: LuckyBlock,
    BlockType.ORIGINAL_BLOCK: OriginalBlock,
    BlockType.FOOT_BLOCK: FootBlock,
    BlockType.PIPE_64_64: Pipe64x64,
    BlockType.PIPE_64_96: Pipe64x96,
    BlockType.PIPE_64_128: Pipe64x128,
}

_ITEM_CLASSES = {
    RewardType.ITEM_COIN: CoinItem,
}


def _half_height(obj: Object) -> float:
    return abs(obj.scaled_size()[1] / 2)


def _half_width(obj: Object) -> float:
    return abs(obj.scaled_size()[0] / 2)


class GravityManager:
    """Pulls Mario, monsters and released items down unless they stand on scenery."""

    def __init__(self, scenes: Iterable[SceneObject]) -> None:
        self.scenes = list(scenes)
        self.gravity_objects: list[Object] = []

    def combination(self, mario, monsters, items) -> list[Object]:
        """Collect every object gravity acts on this frame."""
        self.gravity_objects = [mario, *monsters]
        self.gravity_objects.extend(item for item in items if not item.inside)
        return self.gravity_objects

    def is_falling(self, obj: Object) -> bool:
        """True unless ``obj`` rests on one of the scene objects."""
        return not any(obj.down_collision(scene) for scene in self.scenes)

    def update(self, mario, monsters, items, clock) -> None:
        """Accelerate falling objects and move everything by its vertical speed."""
        now = clock.elapsed_ms()
        for obj in self.combination(mario, monsters, items):
            if self.is_falling(obj):
                delta = (now - obj.falling_time) / 1000.0
                obj.gravity = obj.gravity + GRAVITY * delta
                obj.falling = True
            else:
                obj.gravity = 0.0
                obj.falling = False
            obj.falling_time = now
            x, y = obj.position
            obj.position = (x, y - obj.gravity)


class MapManager:
    """Places tiles on a map whose grid starts at ``map_position``."""

    def __init__(self, map_position: Vec, map_size: Vec, item_size: Vec | None = None) -> None:
        self.map_position = tuple(map_position)
        self.map_size = tuple(map_size)
        self.item_size = item_size

    def _to_world(self, grid: Vec) -> Vec:
        mx, my = self.map_position
        gx, gy = grid
        return (mx + gx * TILE, my + gy * TILE)

    @staticmethod
    def _prepare(obj: Object) -> None:
        obj.z_index = SCENE_Z_INDEX
        obj.scale = SCENE_SCALE

    def set_floor(self, scenes: list, gaps: Iterable[float], floor_y: float) -> None:
        """Lay two rows of floor tiles across the map, skipping the columns in ``gaps``."""
        gap_set = set(gaps)
        last = self.map_size[0] / 32
        columns = itertools.takewhile(lambda i: i <= last, itertools.count(0.5, 1.0))
        for column in columns:
            if column in gap_set:
                continue
            for row in (floor_y, floor_y - 1):
                block = AirBlock(self._to_world((column, row)))
                self._prepare(block)
                scenes.append(block)

    def set_block(self, scenes: list, positions: Iterable[Vec], block_type: BlockType) -> None:
        """Place one block of ``block_type`` at each grid position."""
        block_class = _BLOCK_CLASSES.get(block_type)
        if block_class is None:
            raise ValueError(f"cannot place blocks of type {block_type.name}")
        for position in positions:
            block = block_class(self._to_world(position))
            self._prepare(block)
            scenes.append(block)

    def set_item(
        self,
        scenes: Iterable[SceneObject],
        items: list,
        positions: Iterable[Vec],
        reward_type: RewardType,
    ) -> None:
        """Put an item inside every scene object standing at one of ``positions``."""
        scene_list = list(scenes)
        for position in positions:
            world = self._to_world(position)
            for scene in scene_list:
                if tuple(scene.position) != world:
                    continue
                item_class = _ITEM_CLASSES.get(reward_type)
                if item_class is None:
                    raise ValueError(f"no item available for reward {reward_type.name}")
                item: ItemObject = item_class(world, self.item_size)
                self._prepare(item)
                item.visible = True
                items.append(item)
                scene.item = item


def add_monsters(new_monsters: Iterable[Monster], renderer, monsters: list) -> None:
    """Register ``new_monsters`` with the renderer and the level's monster list."""
    for monster in new_monsters:
        renderer.add_child(monster)
        monsters.append(monster)


def monster_collision(monsters: list, scenes: Iterable[SceneObject]) -> None:
    """Turn monsters around at walls and each other; keep them on the ground."""
    scene_list = list(scenes)
    for monster in monsters:
        for scene in scene_list:
            if monster.left_collision(scene):
                monster.set_way(Way.RIGHT)
            elif monster.right_collision(scene):
                monster.set_way(Way.LEFT)
            if monster.down_collision(scene):
                x = monster.position[0]
                monster.position = (
                    x,
                    scene.position[1] + _half_height(scene) + _half_height(monster) + 1,
                )
        for other in monsters:
            if other is monster or monster.dead or other.dead:
                continue
            if other.left_collision(monster):
                other.set_way(Way.RIGHT)
                monster.set_way(Way.LEFT)
            elif other.right_collision(monster):
                other.set_way(Way.LEFT)
                monster.set_way(Way.RIGHT)


def mario_collision(mario, monsters: Iterable[Monster], scenes: Iterable[SceneObject], clock) -> None:
    """Resolve Mario against enemies and scenery."""
    for monster in monsters:
        if monster.dead:
            continue
        if mario.right_collision(monster) or mario.left_collision(monster):
            mario.hurt()
        elif mario.down_collision(monster):
            monster.hurt(clock)
            mario.gravity = -2.0
    for scene in scenes:
        mx, my = mario.position
        if mario.left_collision(scene):
            mario.position = (scene.position[0] + _half_width(scene) + _half_width(mario) + 5, my)
        elif mario.right_collision(scene):
            mario.position = (scene.position[0] - _half_width(scene) - _half_width(mario) - 5, my)
        mx = mario.position[0]
        if mario.up_collision(scene):
            mario.position = (mx, scene.position[1] - _half_height(scene) - _half_height(mario) - 5)
            mario.gravity = 2.0
            scene.hit(mario, clock)
        elif mario.down_collision(scene):
            mario.position = (mx, scene.position[1] + _half_height(scene) + _half_height(mario) + 1)


def item_collision(items: Iterable[ItemObject], mario, scenes: Iterable[SceneObject]) -> None:
    """Lift items that sink into scenery."""
    scene_list = list(scenes)
    for item in items:
        for scene in scene_list:
            if item.down_collision(scene):
                x, y = item.position
                item.position = (x, y + _half_height(scene) + _half_height(item))


def update_world(mario, monsters: list, scenes: list, items: Iterable[ItemObject], clock) -> None:
    """Advance monsters and items one frame and resolve collisions."""
    for monster in monsters:
        monster.action(clock)
    for item in items:
        item.action(clock)
    monster_collision(monsters, scenes)
    mario_collision(mario, monsters, scenes, clock)