# pixel_mario

A small side-scrolling platformer drawn with pygame. You run and jump
through a scrolling level. The level has lucky blocks that release coins,
brick blocks, pipes, stair blocks and walking mushroom enemies.

## Installing

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Game images

Sprites and backgrounds are loaded from image files. These files are not
part of the package. They are looked up under the directory named by the
`PIXEL_MARIO_RESOURCES` environment variable. If the variable is not set,
the lookup uses `Resources` relative to the current directory. The files
follow the layout `image/Background/...` and `image/character/...`, for
example `image/Background/Level1/level_1.png` and
`image/character/mario/small/stand/small_stand1.png`. Where an object has no
explicit size, its size is read from its image file. So the game, and a
default `Level1`, need these files to be present.

## Playing

```
pixel-mario
pixel-mario --fps 30
```

The game opens a 1280×720 window on the title screen. Press Enter (either
the main key or the keypad key) to start level 1. Release Escape, or close
the window, to quit. `--fps` sets the frame rate. The default is 60, and the
value must be positive.

Controls during the level:

| Key   | Action                                                           |
|-------|------------------------------------------------------------------|
| D     | run right                                                        |
| A     | run left (Mario cannot go past the left edge of the screen)     |
| W     | jump                                                             |
| Space | print Mario's position and the frame time, then the background x |

Mario speeds up while a direction key is held, up to a top speed of 4 per
frame. When no movement key is held, he brakes to a stop. Once he passes the
middle of the screen, the whole world scrolls left. Mushrooms appear in
waves as the level scrolls. Landing on a mushroom squashes it, and after a
second it is dropped out of the level. Touching one from the side makes
small Mario show his dying animation. Bumping a lucky block from below makes
its coin rise out of the block and sink back in.

## What the game does not do

- Only level 1 is ever started. `Level2` and `Level3` exist, but they have
  no background, no scenery and no monsters.
- There is no score, no coin count, no lives and no game over. Getting hurt
  only changes Mario's animation.
- Mushroom, fire flower and star items are not available. `MapManager.set_item`
  raises `ValueError` for any reward other than `RewardType.ITEM_COIN`.
  Because of this, Mario stays small during play. `BigMario` exists, but
  nothing in the level turns Mario into it. Brick blocks break only for a
  Mario who is not small.
- There is no sound.

## Using it as a library

The game logic does not depend on a window, so you can drive it directly.

- `pixel_mario.engine` provides:
  - `Key`, the keys the game reacts to.
  - `Image` and `Animation`, which give the frame path to show at a given time.
  - `Clock`, with `tick`, `elapsed_ms` and `delta_time`.
  - `Input`, with `press`, `release`, `is_pressed`, `is_released` and `end_frame`.
  - `Renderer`. Its `update` returns the visible children in z order, and `draw` paints them onto a pygame surface.
- `pixel_mario.objects` provides:
  - The base classes `Object`, `StillObject`, `AnimationObject`, `ItemObject` and `SceneObject`.
  - The `Way` direction enum.
  - The box probes `contains`, `down_collision`, `left_collision`, `right_collision` and `up_collision`.
  - `generate_animation`.
- `pixel_mario.blocks` provides `AirBlock`, `FootBlock`, `LuckyBlock`, `OriginalBlock`, `Pipe64x64`, `Pipe64x96` and `Pipe64x128`.
- `pixel_mario.items` provides `CoinItem`.
- `pixel_mario.mario` provides `Mario`, `SmallMario`, `BigMario` and `MarioForm`.
- `pixel_mario.monsters` provides `Monster`, `Mushroom` and `Turtle`.
- `pixel_mario.managers` provides:
  - `GravityManager`, `MapManager`, `BlockType` and `RewardType`.
  - The per-frame passes `add_monsters`, `monster_collision`, `mario_collision`, `item_collision` and `update_world`.
- `pixel_mario.levels` provides:
  - `Level`, `Level1`, `Level2` and `Level3`.
  - `create_level(number)`, which raises `ValueError` for a number outside 1–3.
- `pixel_mario.app` provides `App`, `AppState` and `main`.

Most constructors take an optional size, so you can use objects without
image files:

```python
from pixel_mario.engine import Clock, Input, Key
from pixel_mario.levels import Level1

level = Level1(background_size=(3584, 240), sprite_size=(16, 16))
level.start()
keys = Input()
clock = Clock()
keys.press(Key.D)
for _ in range(60):
    clock.tick()
    level.update(keys, clock)
    keys.end_frame()
print(level.mario.position)
```

`App.step(keys, clock)` runs one frame of the state machine. It returns
`False` once the game has ended:

```python
from pixel_mario.app import App
from pixel_mario.engine import Clock, Input, Key
from pixel_mario.levels import Level1

app = App(level_factory=lambda number: Level1((3584, 240), (16, 16)))
keys = Input()
clock = Clock()
keys.press(Key.RETURN)
for _ in range(10):
    clock.tick()
    app.step(keys, clock)
    keys.end_frame()
keys.release(Key.ESCAPE)
while app.step(keys, clock):
    keys.end_frame()
```

The title screen built by `App.title` loads its own images. This happens
only when the title screen is drawn.

## Running the tests

```
pytest
```