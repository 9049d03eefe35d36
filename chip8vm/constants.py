"""CHIP-8 machine constants."""

import jax.numpy as jnp

__all__ = [
    "MEMORY_SIZE", "PROGRAM_START", "FONT_START", "ADDRESS_MASK",
    "SCREEN_WIDTH", "SCREEN_HEIGHT", "NUM_REGISTERS", "NUM_KEYS",
    "STACK_SIZE", "FLAG_REGISTER", "GLYPH_SIZE", "FONT_DATA",
]

MEMORY_SIZE = 4096
PROGRAM_START = 0x200
FONT_START = 0x000
ADDRESS_MASK = 0xFFF

SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32

NUM_REGISTERS = 16
NUM_KEYS = 16
STACK_SIZE = 16
FLAG_REGISTER = 0xF

GLYPH_SIZE = 5

# Each glyph is 5 rows, the high nibble of a row is its 4-pixel pattern:
#   0xF0  1111 0000  ****
#   0x90  1001 0000  *  *
FONT_DATA = jnp.array([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
], dtype=jnp.uint8)
