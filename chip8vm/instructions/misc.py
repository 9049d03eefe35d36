"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp

from chip8vm.constants import ADDRESS_MASK, FLAG_REGISTER, FONT_START, GLYPH_SIZE, MEMORY_SIZE
from chip8vm.state import InterpreterState
from chip8vm.decode import DecodedInstruction
from chip8vm.errors import UnknownOpcode
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad


def execute_get_delay_timer(state: InterpreterState, instruction: DecodedInstruction,
                            framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_wait_for_key(state: InterpreterState, instruction: DecodedInstruction,
                         framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX0A - Wait for key press.

    With no key held the program counter is rewound so this instruction
    runs again on the next cycle.
    """
    pressed_key = keypad.first_pressed()
    if pressed_key is None:
        return state.replace(pc=(state.pc - 2) & ADDRESS_MASK)
    return state.replace(V=state.V.at[instruction.x].set(pressed_key))


def execute_set_delay_timer(state: InterpreterState, instruction: DecodedInstruction,
                            framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=int(state.V[instruction.x]))


def execute_set_sound_timer(state: InterpreterState, instruction: DecodedInstruction,
                            framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=int(state.V[instruction.x]))


def execute_add_to_index(state: InterpreterState, instruction: DecodedInstruction,
                         framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX1E - Add VX to I register.

    On overflow past 0xFFF the index is reduced by 0xFFF, not 0x1000.
    """
    new_i = state.I + int(state.V[instruction.x])
    if new_i > ADDRESS_MASK:
        return state.replace(I=new_i - 0xFFF, V=state.V.at[FLAG_REGISTER].set(1))
    return state.replace(I=new_i, V=state.V.at[FLAG_REGISTER].set(0))


def execute_font_character(state: InterpreterState, instruction: DecodedInstruction,
                           framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX29 - Set I to location of sprite for digit VX."""
    return state.replace(I=FONT_START + int(state.V[instruction.x]) * GLYPH_SIZE)


def execute_bcd_conversion(state: InterpreterState, instruction: DecodedInstruction,
                           framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = int(state.V[instruction.x])
    digits = jnp.array([value // 100, (value // 10) % 10, value % 10], dtype=jnp.uint8)
    indices = (state.I + jnp.arange(3)) % MEMORY_SIZE
    return state.replace(memory=state.memory.at[indices].set(digits))


def execute_store_registers(state: InterpreterState, instruction: DecodedInstruction,
                            framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX55 - Store V0 through VX in memory starting at I."""
    count = instruction.x + 1
    indices = (state.I + jnp.arange(count)) % MEMORY_SIZE
    return state.replace(memory=state.memory.at[indices].set(state.V[:count]))


def execute_load_registers(state: InterpreterState, instruction: DecodedInstruction,
                           framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """FX65 - Load V0 through VX from memory starting at I."""
    count = instruction.x + 1
    indices = (state.I + jnp.arange(count)) % MEMORY_SIZE
    return state.replace(V=state.V.at[:count].set(state.memory[indices]))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: InterpreterState, instruction: DecodedInstruction,
                             framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn)
    if handler is None:
        raise UnknownOpcode(instruction.raw)
    return handler(state, instruction, framebuffer, keypad)
