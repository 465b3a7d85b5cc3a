"""Collectable items released from blocks."""

from __future__ import annotations

from pixel_mario.engine import RESOURCE_DIR
from pixel_mario.objects import ItemObject, Vec

COIN_IMAGE = RESOURCE_DIR / "image" / "character" / "Item" / "Coin.png"


class CoinItem(ItemObject):
    """A coin that pops up out of a block and drops back inside."""

    def __init__(self, position: Vec, size: Vec | None = None) -> None:
        super().__init__(position, COIN_IMAGE, size)

    def action(self, clock) -> None:
        if not self.spawning:
            return
        self.visible = True
        since = clock.elapsed_ms() - self.start_spawning_time
        if since <= 2000:
            self.gravity = -2.5
        elif since <= 4000:
            self.gravity = 2.5
        else:
            self.gravity = 0.0
            self.spawning = False
            self.inside = True