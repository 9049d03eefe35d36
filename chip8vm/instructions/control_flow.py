"""CHIP-8 control flow instructions."""

from chip8vm.constants import ADDRESS_MASK
from chip8vm.state import InterpreterState
from chip8vm.decode import DecodedInstruction
from chip8vm.errors import UnknownOpcode
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad
from chip8vm.stack import push


def execute_jump(state: InterpreterState, instruction: DecodedInstruction,
                 framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=instruction.nnn)


def execute_call(state: InterpreterState, instruction: DecodedInstruction,
                 framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc, instruction.raw))
    return execute_jump(state, instruction, framebuffer, keypad)


def make_skip_instruction(condition_fn, require_zero_n=False):
    """Factory for skip instructions.

    ``condition_fn(state, instruction, keypad)`` decides whether the next
    instruction is skipped.
    """
    def skip_instruction(state: InterpreterState, instruction: DecodedInstruction,
                         framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
        if require_zero_n and instruction.n != 0:
            raise UnknownOpcode(instruction.raw)
        if condition_fn(state, instruction, keypad):
            return state.replace(pc=(state.pc + 2) & ADDRESS_MASK)
        return state
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst, keypad: int(state.V[inst.x]) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst, keypad: int(state.V[inst.x]) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst, keypad: int(state.V[inst.x]) == int(state.V[inst.y]),
    require_zero_n=True,
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst, keypad: int(state.V[inst.x]) != int(state.V[inst.y]),
    require_zero_n=True,
)


def execute_jump_with_offset(state: InterpreterState, instruction: DecodedInstruction,
                             framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = (instruction.nnn + int(state.V[0])) & ADDRESS_MASK
    return state.replace(pc=jump_address)


_skip_if_key_pressed = make_skip_instruction(
    lambda state, inst, keypad: keypad.is_pressed(int(state.V[inst.x]) & 0xF)
)

_skip_if_key_not_pressed = make_skip_instruction(
    lambda state, inst, keypad: not keypad.is_pressed(int(state.V[inst.x]) & 0xF)
)


def execute_skip_if_key(state: InterpreterState, instruction: DecodedInstruction,
                        framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn == 0x9E:
        handler = _skip_if_key_pressed
    elif instruction.nn == 0xA1:
        handler = _skip_if_key_not_pressed
    else:
        raise UnknownOpcode(instruction.raw)
    return handler(state, instruction, framebuffer, keypad)
