"""CHIP-8 interpreter state structures."""

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from chip8vm.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_REGISTERS, STACK_SIZE
)


@dataclass(frozen=True)
class StackState:
    """Return-address stack for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class InterpreterState(PyTreeNode):
    """Registers, memory and timers of one CHIP-8 machine."""
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: int = PROGRAM_START
    stack: StackState = field(default_factory=StackState)
    delay_timer: int = 0
    sound_timer: int = 0
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: int = 0


def create_state(rng: jax.Array = None) -> InterpreterState:
    """Create initial interpreter state with the glyph set loaded."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = InterpreterState(rng)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(FONT_DATA))
