"""CHIP-8 memory and register operations."""

import jax
import jax.numpy as jnp

from chip8vm.state import InterpreterState
from chip8vm.decode import DecodedInstruction
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad


def execute_set(state: InterpreterState, instruction: DecodedInstruction,
                framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """6XNN - Set VX = NN."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.nn))


def execute_add(state: InterpreterState, instruction: DecodedInstruction,
                framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """7XNN - Add NN to VX, no carry flag."""
    result = (int(state.V[instruction.x]) + instruction.nn) & 0xFF
    return state.replace(V=state.V.at[instruction.x].set(result))


def execute_set_index(state: InterpreterState, instruction: DecodedInstruction,
                      framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """ANNN - Set I = NNN."""
    return state.replace(I=instruction.nnn)


def execute_random(state: InterpreterState, instruction: DecodedInstruction,
                   framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """CXNN - Set VX = random & NN."""
    key, subkey = jax.random.split(state.rng)
    random_value = int(jax.random.randint(subkey, shape=(), minval=0, maxval=256, dtype=jnp.int32))
    return state.replace(V=state.V.at[instruction.x].set(random_value & instruction.nn), rng=key)
