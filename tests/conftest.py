"""Test configuration and fixtures for CHIP-8 interpreter tests."""

import jax
import jax.numpy as jnp
import pytest

from chip8vm import Framebuffer, Interpreter, Keypad, create_state, execute


@pytest.fixture
def fresh_state():
    """Provide a fresh interpreter state for each test."""
    return create_state()


@pytest.fixture
def framebuffer():
    return Framebuffer()


@pytest.fixture
def keypad():
    return Keypad()


@pytest.fixture
def step(framebuffer, keypad):
    """Execute one instruction word against the test peripherals."""
    def _step(state, instruction):
        return execute(state, instruction, framebuffer, keypad)
    return _step


@pytest.fixture
def make_interpreter():
    """Build an interpreter whose program is the given instruction words."""
    def _make(*words, seed=0):
        return Interpreter.from_rom(assemble(*words), rng=jax.random.PRNGKey(seed))
    return _make


def assemble(*words):
    """Pack 16-bit instruction words into big-endian ROM bytes."""
    return b"".join(word.to_bytes(2, "big") for word in words)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )
