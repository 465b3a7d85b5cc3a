from types import SimpleNamespace

import pygame
import pytest

from pixel_mario.engine import Animation, Clock, Image, Input, Key, Renderer


def manual_clock():
    now = [0.0]
    return now, Clock(lambda: now[0])


def test_clock_starts_at_zero_and_tracks_ticks():
    now, clock = manual_clock()
    assert clock.elapsed_ms() == 0.0
    now[0] = 1.5
    clock.tick()
    assert clock.elapsed_ms() == 1500.0
    assert clock.delta_time() == 1.5
    now[0] = 2.0
    clock.tick()
    assert clock.elapsed_ms() == 2000.0
    assert clock.delta_time() == pytest.approx(0.5)


def test_clock_frozen_between_ticks():
    now, clock = manual_clock()
    now[0] = 3.0
    assert clock.elapsed_ms() == 0.0
    clock.tick()
    assert clock.elapsed_ms() == 3000.0


def test_input_press_and_release():
    keys = Input()
    keys.press(Key.D)
    assert keys.is_pressed(Key.D)
    assert not keys.is_released(Key.D)
    keys.release(Key.D)
    assert not keys.is_pressed(Key.D)
    assert keys.is_released(Key.D)
    keys.end_frame()
    assert not keys.is_released(Key.D)


def test_input_keys_are_independent():
    keys = Input()
    keys.press(Key.A)
    assert not keys.is_pressed(Key.W)
    assert keys.is_pressed(Key.A)


def test_image_given_size():
    image = Image("block.png", size=(32, 32))
    assert image.size == (32, 32)
    assert image.current_path(1234) == "block.png"


def test_animation_frames_advance_by_interval():
    paths = ["a1.png", "a2.png", "a3.png"]
    anim = Animation(paths, interval=100, cooldown=20)
    assert anim.current_path(0) == paths[0]
    assert anim.current_path(150) == paths[1]
    assert anim.current_path(250) == paths[2]


def test_animation_loops_after_cooldown():
    paths = ["a1.png", "a2.png"]
    anim = Animation(paths, interval=100, cooldown=20)
    assert anim.current_path(210) == paths[1]
    assert anim.current_path(220) == paths[0]


def test_animation_without_loop_stays_on_last_frame():
    paths = ["a1.png", "a2.png"]
    anim = Animation(paths, looping=False, interval=100)
    assert anim.current_path(10_000) == paths[-1]


def test_animation_not_playing_shows_first_frame():
    paths = ["a1.png", "a2.png"]
    anim = Animation(paths, play=False)
    assert anim.current_path(150) == paths[0]


def test_animation_rejects_bad_arguments():
    with pytest.raises(ValueError):
        Animation([])
    with pytest.raises(ValueError):
        Animation(["a.png"], interval=0)


def test_renderer_orders_by_z_and_skips_hidden():
    low = SimpleNamespace(z_index=1, visible=True)
    high = SimpleNamespace(z_index=50, visible=True)
    hidden = SimpleNamespace(z_index=10, visible=False)
    renderer = Renderer()
    for child in (high, hidden, low):
        renderer.add_child(child)
    assert renderer.update() == [low, high]


def _write_bmp(path, colours):
    surf = pygame.Surface((len(colours), 1))
    for x, colour in enumerate(colours):
        surf.set_at((x, 0), colour)
    pygame.image.save(surf, str(path))


def _pixels_of(surface, colour):
    w, h = surface.get_size()
    return {
        (x, y)
        for x in range(w)
        for y in range(h)
        if tuple(surface.get_at((x, y)))[:3] == colour
    }


def test_image_size_read_from_file(tmp_path):
    path = tmp_path / "strip.bmp"
    _write_bmp(path, [(255, 0, 0)] * 3)
    assert Image(path).size == (3, 1)


def test_draw_centres_child(tmp_path):
    red = (255, 0, 0)
    path = tmp_path / "red.bmp"
    source = pygame.Surface((4, 4))
    source.fill(red)
    pygame.image.save(source, str(path))
    child = SimpleNamespace(
        drawable=Image(path), position=(0, 0), scale=(1, 1), pivot=(0, 0),
        z_index=0, visible=True,
    )
    target = pygame.Surface((10, 10))
    _, clock = manual_clock()
    Renderer([child]).draw(target, clock)
    pixels = _pixels_of(target, red)
    assert len(pixels) == 4 * 4
    xs = [x for x, _ in pixels]
    assert (min(xs) + max(xs) + 1) / 2 == target.get_width() / 2


def test_draw_negative_scale_mirrors(tmp_path):
    red, blue = (255, 0, 0), (0, 0, 255)
    path = tmp_path / "pair.bmp"
    _write_bmp(path, [red, blue])
    child = SimpleNamespace(
        drawable=Image(path), position=(0, 0), scale=(-1, 1), pivot=(0, 0),
        z_index=0, visible=True,
    )
    target = pygame.Surface((10, 10))
    _, clock = manual_clock()
    Renderer([child]).draw(target, clock)
    (red_x, _), = _pixels_of(target, red)
    (blue_x, _), = _pixels_of(target, blue)
    assert blue_x < red_x