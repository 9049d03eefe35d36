"""CHIP-8 hexadecimal keypad."""

from typing import Optional

import jax.numpy as jnp

from chip8vm.constants import NUM_KEYS


class Keypad:
    """Pressed/released state of the 16 keys 0x0-0xF."""

    def __init__(self):
        self.keys = jnp.zeros(NUM_KEYS, dtype=jnp.bool_)

    @staticmethod
    def _check(index: int) -> int:
        if not 0 <= index < NUM_KEYS:
            raise IndexError(f"Key index {index} out of range 0-{NUM_KEYS - 1}")
        return index

    def press(self, index: int):
        self.keys = self.keys.at[self._check(index)].set(True)

    def release(self, index: int):
        self.keys = self.keys.at[self._check(index)].set(False)

    def release_all(self):
        self.keys = jnp.zeros(NUM_KEYS, dtype=jnp.bool_)

    def is_pressed(self, index: int) -> bool:
        return bool(self.keys[self._check(index)])

    def first_pressed(self) -> Optional[int]:
        """Lowest pressed key index, or None when nothing is held."""
        if not jnp.any(self.keys):
            return None
        return int(jnp.argmax(self.keys))

    @property
    def pressed(self) -> tuple[int, ...]:
        return tuple(int(i) for i in jnp.flatnonzero(self.keys))

    def __repr__(self) -> str:
        keys = " ".join(f"{i:X}" for i in self.pressed)
        return f"Keypad(pressed=[{keys}])"
