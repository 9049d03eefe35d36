"""Tests for the framebuffer."""

import jax.numpy as jnp
import pytest

from chip8vm import SCREEN_HEIGHT, SCREEN_WIDTH, Framebuffer


def test_starts_blank(framebuffer):
    assert framebuffer.pixels.shape == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert not framebuffer.pixels.any()


def test_dimensions_exposed():
    assert Framebuffer.WIDTH == 64
    assert Framebuffer.HEIGHT == 32


def test_draw_returns_no_collision_on_blank(framebuffer):
    assert framebuffer.draw_sprite(5, 5, [0xAA]) is False
    assert [framebuffer.get_pixel(5 + j, 5) for j in range(8)] == [1, 0, 1, 0, 1, 0, 1, 0]


def test_partial_overlap_collides(framebuffer):
    framebuffer.draw_sprite(0, 0, [0x0F])
    assert framebuffer.draw_sprite(0, 0, [0x01]) is True
    assert framebuffer.get_pixel(7, 0) == 0
    assert framebuffer.get_pixel(6, 0) == 1


def test_disjoint_sprites_do_not_collide(framebuffer):
    framebuffer.draw_sprite(0, 0, [0xF0])
    assert framebuffer.draw_sprite(0, 0, [0x0F]) is False
    assert all(framebuffer.get_pixel(x, 0) == 1 for x in range(8))


def test_double_draw_restores(framebuffer):
    sprite = [0x18, 0x3C, 0x7E, 0xFF, 0xFF, 0x7E, 0x3C, 0x18]
    framebuffer.draw_sprite(30, 10, [0xFF, 0x00, 0xFF])
    before = framebuffer.pixels

    first = framebuffer.draw_sprite(28, 9, sprite)
    second = framebuffer.draw_sprite(28, 9, sprite)

    assert first is True
    assert second is True
    assert jnp.array_equal(framebuffer.pixels, before)


def test_corner_wraps_both_axes(framebuffer):
    framebuffer.draw_sprite(63, 31, [0xC0, 0xC0])
    assert framebuffer.get_pixel(63, 31) == 1
    assert framebuffer.get_pixel(0, 31) == 1
    assert framebuffer.get_pixel(63, 0) == 1
    assert framebuffer.get_pixel(0, 0) == 1
    assert int(framebuffer.pixels.sum()) == 4


def test_clear(framebuffer):
    framebuffer.draw_sprite(10, 10, [0xFF] * 8)
    framebuffer.clear()
    assert not framebuffer.pixels.any()


@pytest.mark.parametrize("x, y", [(-1, 0), (64, 0), (0, 32), (0, -1)])
def test_get_pixel_out_of_range(framebuffer, x, y):
    with pytest.raises(IndexError):
        framebuffer.get_pixel(x, y)


def test_empty_sprite(framebuffer):
    assert framebuffer.draw_sprite(0, 0, []) is False
    assert not framebuffer.pixels.any()


def test_tall_sprite_wraps_onto_itself(framebuffer):
    """Row 32 lands back on row 0 and is XORed after row 0."""
    sprite = [0x80] + [0x00] * 31 + [0x80]

    collision = framebuffer.draw_sprite(0, 0, sprite)

    assert framebuffer.get_pixel(0, 0) == 0
    assert collision is True


def test_tall_sprite_rows_after_wrap_are_drawn(framebuffer):
    sprite = [0x00] * 33 + [0x40]

    collision = framebuffer.draw_sprite(0, 5, sprite)

    # Row 33 wraps to (5 + 33) % 32 = 6
    assert framebuffer.get_pixel(1, 6) == 1
    assert int(framebuffer.pixels.sum()) == 1
    assert collision is False
