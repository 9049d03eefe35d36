"""CHIP-8 system instructions (0x0xxx)."""

from chip8vm.state import InterpreterState
from chip8vm.decode import DecodedInstruction
from chip8vm.errors import UnsupportedFeature
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad
from chip8vm.stack import pop


def execute_clear_screen(state: InterpreterState, instruction: DecodedInstruction,
                         framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """00E0 - Clear display."""
    framebuffer.clear()
    return state


def execute_return(state: InterpreterState, instruction: DecodedInstruction,
                   framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack, instruction.raw)
    return state.replace(stack=stack, pc=address)


def execute_machine_call(state: InterpreterState, instruction: DecodedInstruction,
                         framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """0NNN - Call machine-language routine (not emulated)."""
    raise UnsupportedFeature(instruction.raw)


def execute_system_instruction(state: InterpreterState, instruction: DecodedInstruction,
                               framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """Dispatch system instructions."""
    if instruction.raw == 0x00E0:
        handler = execute_clear_screen
    elif instruction.raw == 0x00EE:
        handler = execute_return
    else:
        handler = execute_machine_call
    return handler(state, instruction, framebuffer, keypad)
