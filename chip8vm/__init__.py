"""CHIP-8 virtual machine package."""

from chip8vm.state import InterpreterState, StackState, create_state
from chip8vm.interpreter import Interpreter, execute, fetch, load_rom, read_rom, tick_timers
from chip8vm.decode import DecodedInstruction, decode
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad
from chip8vm.errors import (
    Chip8Error, RomLoadError, RuntimeFault, UnknownOpcode, UnsupportedFeature,
    StackOverflow, StackUnderflow,
)
from chip8vm.constants import *

__all__ = [
    "Interpreter",
    "InterpreterState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "tick_timers",
    "load_rom",
    "read_rom",
    "DecodedInstruction",
    "decode",
    "Framebuffer",
    "Keypad",
    "Chip8Error",
    "RomLoadError",
    "RuntimeFault",
    "UnknownOpcode",
    "UnsupportedFeature",
    "StackOverflow",
    "StackUnderflow",
    "PROGRAM_START",
    "FONT_START",
    "MEMORY_SIZE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
