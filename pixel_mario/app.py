"""Game state machine and the window loop."""

from __future__ import annotations

import argparse
import enum
import logging
from typing import Callable

from pixel_mario.engine import RESOURCE_DIR, Clock, Input, Key, Renderer
from pixel_mario.levels import Level, create_level
from pixel_mario.objects import AnimationObject, StillObject

log = logging.getLogger(__name__)

WINDOW_SIZE = (1280, 720)

_TITLE_DIR = RESOURCE_DIR / "image"


class AppState(enum.Enum):
    """Stages the game moves through."""

    TITLE = enum.auto()
    TITLE_UPDATE = enum.auto()
    START = enum.auto()
    UPDATE = enum.auto()
    END = enum.auto()


class App:
    """Title screen, level start, play and shutdown."""

    def __init__(self, level_factory: Callable[[int], Level] = create_level) -> None:
        self.level_factory = level_factory
        self.state = AppState.TITLE
        self.level_number = 1
        self.level: Level | None = None
        self.title_renderer: Renderer | None = None
        self.background: StillObject | None = None
        self.title_mushroom: AnimationObject | None = None
        self.title_word: AnimationObject | None = None
        self.running = True

    @property
    def renderer(self) -> Renderer | None:
        """The renderer whose children are on screen now."""
        if self.level is not None:
            return self.level.renderer
        return self.title_renderer

    def title(self) -> None:
        """Build the title screen."""
        log.debug("Title")
        self.background = StillObject(_TITLE_DIR / "Background" / "Title" / "The_Title.png")
        self.background.position = (0, 0)
        self.background.z_index = 49
        self.background.scale = (1.6, 1.2)
        self.title_renderer = Renderer([self.background])

        self.title_mushroom = AnimationObject(
            2, _TITLE_DIR / "character" / "TitleMashroom" / "mushroom"
        )
        self.title_mushroom.position = (-220, -103)
        self.title_mushroom.scale = (0.15, 0.15)
        self.title_mushroom.z_index = 51
        self.title_renderer.add_child(self.title_mushroom)

        self.title_word = AnimationObject(
            2, _TITLE_DIR / "character" / "TitleWord" / "EnterContinue"
        )
        self.title_word.position = (0, -200)
        self.title_word.z_index = 52
        self.title_word.scale = (4.5, 3)
        self.title_renderer.add_child(self.title_word)

        self.state = AppState.TITLE_UPDATE

    @staticmethod
    def _wants_exit(keys) -> bool:
        return keys.is_released(Key.ESCAPE) or keys.quit_requested

    def title_update(self, keys) -> None:
        """Wait on the title screen for Enter or Escape."""
        log.debug("TitleUpdate")
        if keys.is_pressed(Key.KP_ENTER) or keys.is_pressed(Key.RETURN):
            self.state = AppState.START
        if self.title_renderer is not None:
            self.title_renderer.update()
        if self._wants_exit(keys):
            self.state = AppState.END

    def start(self) -> None:
        """Create and start the current level."""
        log.debug("Start")
        self.level = self.level_factory(self.level_number)
        self.level.start()
        self.state = AppState.UPDATE

    def update(self, keys, clock) -> None:
        """Play one frame of the level."""
        self.level.update(keys, clock)
        if self._wants_exit(keys):
            self.state = AppState.END

    def end(self) -> None:
        log.debug("End")

    def step(self, keys, clock) -> bool:
        """Run the handler for the current state; False once the game has ended."""
        if self.state is AppState.TITLE:
            self.title()
        elif self.state is AppState.TITLE_UPDATE:
            self.title_update(keys)
        elif self.state is AppState.START:
            self.start()
        elif self.state is AppState.UPDATE:
            self.update(keys, clock)
        elif self.state is AppState.END:
            self.end()
            self.running = False
        return self.running


def _key_map(pygame) -> dict:
    return {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RETURN: Key.RETURN,
        pygame.K_KP_ENTER: Key.KP_ENTER,
        pygame.K_ESCAPE: Key.ESCAPE,
    }


def main(argv=None) -> int:
    """Open the game window and run until the player quits."""
    parser = argparse.ArgumentParser(prog="pixel-mario", description="Side-scrolling platform game.")
    parser.add_argument("--fps", type=int, default=60, help="frames per second (default: 60)")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Pixel Mario")
        keys_by_code = _key_map(pygame)
        frame_clock = pygame.time.Clock()
        clock = Clock()
        keys = Input()
        app = App()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    keys.quit_requested = True
                elif event.type == pygame.KEYDOWN and event.key in keys_by_code:
                    keys.press(keys_by_code[event.key])
                elif event.type == pygame.KEYUP and event.key in keys_by_code:
                    keys.release(keys_by_code[event.key])
            clock.tick()
            running = app.step(keys, clock)
            surface.fill((0, 0, 0))
            renderer = app.renderer
            if renderer is not None:
                renderer.draw(surface, clock)
            pygame.display.flip()
            keys.end_frame()
            frame_clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())