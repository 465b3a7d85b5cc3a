import enum
from types import SimpleNamespace

import pytest

from pixel_mario.blocks import (
    AirBlock,
    FootBlock,
    LuckyBlock,
    OriginalBlock,
    Pipe64x128,
    Pipe64x64,
    Pipe64x96,
)
from pixel_mario.engine import Clock
from pixel_mario.items import CoinItem


class Form(enum.Enum):
    SMALL = 0
    BIG = 1
    FIRE = 2


def clock_at(ms):
    now = [0.0]
    clock = Clock(lambda: now[0])
    now[0] = ms / 1000
    clock.tick()
    return clock


@pytest.mark.parametrize(
    "cls, size",
    [(Pipe64x64, (64, 64)), (Pipe64x96, (64, 96)), (Pipe64x128, (64, 128))],
)
def test_pipe_sizes(cls, size):
    pipe = cls((0, 0))
    assert pipe.scaled_size() == size
    assert pipe.image_path.endswith(f"Pipe_{size[0]}_{size[1]}.png")


@pytest.mark.parametrize("cls", [AirBlock, FootBlock, Pipe64x64])
def test_solid_blocks_ignore_hits(cls):
    block = cls((7, 8))
    block.hit(SimpleNamespace(form=Form.BIG), clock_at(0))
    assert block.visible
    assert block.position == (7, 8)
    assert block.scale == (1.0, 1.0)


def test_lucky_block_releases_item():
    block = LuckyBlock((0, 0))
    coin = CoinItem((0, 0), size=(16, 16))
    block.item = coin
    block.hit(SimpleNamespace(form=Form.SMALL), clock_at(1500))
    assert block.got_hit
    assert block.drawable.path.endswith("LuckyBlock_.png")
    assert coin.spawning
    assert not coin.inside
    assert coin.start_spawning_time == 1500.0


def test_lucky_block_only_releases_once():
    block = LuckyBlock((0, 0))
    coin = CoinItem((0, 0), size=(16, 16))
    block.item = coin
    mario = SimpleNamespace(form=Form.SMALL)
    block.hit(mario, clock_at(1000))
    coin.spawning = False
    block.hit(mario, clock_at(5000))
    assert coin.start_spawning_time == 1000.0
    assert not coin.spawning


def test_lucky_block_without_item_changes_look():
    block = LuckyBlock((0, 0))
    block.hit(SimpleNamespace(form=Form.SMALL), clock_at(0))
    assert block.got_hit
    assert block.drawable.path.endswith("LuckyBlock_.png")


def test_small_mario_does_not_break_brick():
    brick = OriginalBlock((0, 0))
    brick.hit(SimpleNamespace(form=Form.SMALL), clock_at(0))
    assert brick.visible
    assert brick.scale == (1.0, 1.0)


@pytest.mark.parametrize("form", [Form.BIG, Form.FIRE])
def test_grown_mario_breaks_brick(form):
    brick = OriginalBlock((0, 0))
    brick.hit(SimpleNamespace(form=form), clock_at(0))
    assert not brick.visible
    assert brick.scaled_size() == (0.0, 0.0)


def test_blocks_share_tile_size():
    air = AirBlock((0, 0))
    foot = FootBlock((0, 0))
    lucky = LuckyBlock((0, 0))
    brick = OriginalBlock((0, 0))
    sizes = {b.scaled_size() for b in (air, foot, lucky, brick)}
    assert len(sizes) == 1