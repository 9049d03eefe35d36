"""CHIP-8 display operations."""

import jax.numpy as jnp

from chip8vm.constants import FLAG_REGISTER, MEMORY_SIZE
from chip8vm.state import InterpreterState
from chip8vm.decode import DecodedInstruction
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad


def execute_display(state: InterpreterState, instruction: DecodedInstruction,
                    framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """DXYN - Draw sprite at (VX, VY) with height N."""
    addresses = (state.I + jnp.arange(instruction.n)) % MEMORY_SIZE
    sprite = state.memory[addresses]
    collision = framebuffer.draw_sprite(int(state.V[instruction.x]), int(state.V[instruction.y]), sprite)
    return state.replace(V=state.V.at[FLAG_REGISTER].set(int(collision)))
