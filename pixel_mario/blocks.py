"""Blocks and pipes that make up the level scenery."""

from __future__ import annotations

from pixel_mario.engine import RESOURCE_DIR, Image
from pixel_mario.objects import SceneObject, Vec

BLOCK_DIR = RESOURCE_DIR / "image" / "Background" / "Level1" / "Block"
TILE_SIZE: Vec = (32, 32)


class _Block(SceneObject):
    image_name = ""
    frame_size: Vec = TILE_SIZE

    def __init__(self, position: Vec) -> None:
        super().__init__(BLOCK_DIR / self.image_name, position, size=self.frame_size)


class _SolidBlock(_Block):
    def hit(self, mario, clock) -> None:
        """Solid scenery is not affected by hits."""


class AirBlock(_SolidBlock):
    """Invisible-looking floor tile."""

    image_name = "AirBlock.png"


class FootBlock(_SolidBlock):
    """Stair block."""

    image_name = "FootBlock.png"


class LuckyBlock(_Block):
    """Question block that releases its item once."""

    image_name = "LuckyBlock.png"

    def change_state(self) -> None:
        self.drawable = Image(BLOCK_DIR / "LuckyBlock_.png", size=self.frame_size)
        self.got_hit = True

    def hit(self, mario, clock) -> None:
        if self.got_hit:
            return
        self.change_state()
        if self.item is not None:
            self.item.spawning = True
            self.item.inside = False
            self.item.start_spawning_time = clock.elapsed_ms()


class OriginalBlock(_Block):
    """Brick that a grown Mario breaks; ``mario.form`` names his current form."""

    image_name = "OriginalBlock.png"

    def hit(self, mario, clock) -> None:
        if mario.form.name != "SMALL":
            self.scale = (0.0, 0.0)
            self.visible = False


class Pipe64x64(_SolidBlock):
    image_name = "Pipe_64_64.png"
    frame_size = (64, 64)


class Pipe64x96(_SolidBlock):
    image_name = "Pipe_64_96.png"
    frame_size = (64, 96)


class Pipe64x128(_SolidBlock):
    image_name = "Pipe_64_128.png"
    frame_size = (64, 128)