"""CHIP-8 monochrome framebuffer."""

from typing import Sequence

import jax.numpy as jnp

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT

# Pre-computed coordinate grids for sprite blits
xx, yy = jnp.meshgrid(jnp.arange(SCREEN_WIDTH), jnp.arange(SCREEN_HEIGHT), indexing='ij')


class Framebuffer:
    """64x32 pixel plane indexed as ``pixels[x, y]``.

    The plane is toroidal for drawing: sprite pixels that run past the
    right or bottom edge reappear on the opposite side.
    """

    WIDTH = SCREEN_WIDTH
    HEIGHT = SCREEN_HEIGHT

    def __init__(self):
        self.pixels = jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_)

    def clear(self):
        self.pixels = jnp.zeros_like(self.pixels)

    def get_pixel(self, x: int, y: int) -> int:
        """Read one pixel. Coordinates are not wrapped."""
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            raise IndexError(f"Pixel ({x}, {y}) outside {SCREEN_WIDTH}x{SCREEN_HEIGHT} plane")
        return int(self.pixels[x, y])

    def draw_sprite(self, x: int, y: int, sprite: Sequence[int]) -> bool:
        """XOR a sprite onto the plane, one byte per row, MSB leftmost.

        Rows past the plane height wrap onto rows already drawn and are
        applied in order. Returns True if any lit pixel was switched off.
        """
        rows = jnp.asarray(sprite, dtype=jnp.uint8)
        collision = False
        # Every chunk of HEIGHT rows starts again at row y.
        for start in range(0, rows.shape[0], SCREEN_HEIGHT):
            collision |= self._blit(x, y, rows[start:start + SCREEN_HEIGHT])
        return collision

    def _blit(self, x: int, y: int, rows: jnp.ndarray) -> bool:
        """XOR at most HEIGHT rows, so each plane cell is hit once."""
        height = rows.shape[0]

        # Offset of every plane cell from the sprite origin, wrapped so the
        # sprite continues across the edges.
        col_offset = (xx - x) % SCREEN_WIDTH
        row_offset = (yy - y) % SCREEN_HEIGHT
        covered = (col_offset < 8) & (row_offset < height)

        sprite_bytes = rows[jnp.minimum(row_offset, height - 1)]
        bits = (sprite_bytes >> (7 - jnp.minimum(col_offset, 7))) & 1
        sprite_plane = (bits == 1) & covered

        collision = bool(jnp.any(self.pixels & sprite_plane))
        self.pixels = self.pixels ^ sprite_plane
        return collision

    def __repr__(self) -> str:
        return f"Framebuffer(lit={int(jnp.sum(self.pixels))})"
