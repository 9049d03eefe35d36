"""Main CHIP-8 interpreter: fetch, decode, dispatch and timers."""

import os
from typing import BinaryIO, Optional, Union

import jax
import jax.numpy as jnp

from chip8vm.constants import ADDRESS_MASK, MEMORY_SIZE, PROGRAM_START
from chip8vm.decode import decode
from chip8vm.errors import RomLoadError, RuntimeFault
from chip8vm.framebuffer import Framebuffer
from chip8vm.keypad import Keypad
from chip8vm.logging import ConsoleLogger, get_logger
from chip8vm.state import InterpreterState, create_state
from chip8vm.instructions.system import execute_system_instruction
from chip8vm.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key
)
from chip8vm.instructions.alu import execute_alu_operation
from chip8vm.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8vm.instructions.display import execute_display
from chip8vm.instructions.misc import execute_misc_instruction

RomSource = Union[str, os.PathLike, bytes, bytearray, BinaryIO]

# Indexed by the first nibble of the instruction word.
INSTRUCTION_TABLE = (
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
)


def execute(state: InterpreterState, instruction: int,
            framebuffer: Framebuffer, keypad: Keypad) -> InterpreterState:
    """Execute single CHIP-8 instruction."""
    decoded_instruction = decode(instruction)
    handler = INSTRUCTION_TABLE[decoded_instruction.opcode]
    return handler(state, decoded_instruction, framebuffer, keypad)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into uint16."""
    return (int(high) << 8) | int(low)


def fetch(state: InterpreterState) -> tuple[InterpreterState, int]:
    """Fetch next instruction from memory and advance the program counter."""
    pc = state.pc & ADDRESS_MASK
    instruction = _pack_u16(state.memory[pc], state.memory[(pc + 1) & ADDRESS_MASK])
    return state.replace(pc=(pc + 2) & ADDRESS_MASK), instruction


def tick_timers(state: InterpreterState) -> InterpreterState:
    """Decrement the delay and sound timers, stopping at zero."""
    return state.replace(
        delay_timer=max(state.delay_timer - 1, 0),
        sound_timer=max(state.sound_timer - 1, 0),
    )


def read_rom(source: RomSource) -> bytes:
    """Read raw program bytes from a path, a bytes object or a binary file."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        if isinstance(source, (str, os.PathLike)):
            with open(source, 'rb') as f:
                return f.read()
        data = source.read()
    except AttributeError as e:
        raise RomLoadError(f"Cannot read ROM from {type(source).__name__} object") from e
    except OSError as e:
        raise RomLoadError(f"Cannot read ROM {source!r}: {e}") from e
    if not isinstance(data, (bytes, bytearray)):
        raise RomLoadError(f"ROM source returned {type(data).__name__}, expected bytes")
    return bytes(data)


def load_rom(state: InterpreterState, rom_data: bytes) -> InterpreterState:
    """Load ROM data into CHIP-8 memory starting at 0x200.

    Bytes that do not fit below the end of memory are dropped.
    """
    rom_data = rom_data[:MEMORY_SIZE - PROGRAM_START]
    if not rom_data:
        return state
    rom_array = jnp.array(list(rom_data), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(rom_data)].set(rom_array)
    return state.replace(memory=new_memory)


class Interpreter:
    """One CHIP-8 machine: memory, registers, stack, timers and RNG.

    The framebuffer and keypad are owned by the caller and passed in on
    every step; the interpreter keeps no reference to them.

    Args:
        state: Initial state. Defaults to a fresh machine with the glyph
            set loaded and empty program memory.
        rng: ``jax.random`` key feeding the CXNN random source. When
            ``state`` is given its own key is used instead, also for later
            reloads.
        logger: Logger for load, trace and fault messages.
    """

    def __init__(
        self,
        state: Optional[InterpreterState] = None,
        rng: Optional[jax.Array] = None,
        logger: Optional[ConsoleLogger] = None,
    ):
        if state is not None:
            self.rng = state.rng
        else:
            self.rng = rng if rng is not None else jax.random.PRNGKey(0)
        self.state = state if state is not None else create_state(self.rng)
        self.logger = logger or get_logger("chip8vm")
        self.cycles = 0

    @classmethod
    def from_rom(
        cls,
        source: RomSource,
        rng: Optional[jax.Array] = None,
        logger: Optional[ConsoleLogger] = None,
    ) -> "Interpreter":
        """Create an interpreter with ``source`` loaded at 0x200.

        Raises:
            RomLoadError: The byte source could not be read.
        """
        interpreter = cls(rng=rng, logger=logger)
        interpreter.load_rom(source)
        return interpreter

    def load_rom(self, source: RomSource):
        """Reset the machine and load a new program."""
        rom_data = read_rom(source)
        capacity = MEMORY_SIZE - PROGRAM_START
        if len(rom_data) > capacity:
            self.logger.warning(
                f"ROM is {len(rom_data)} bytes, only the first {capacity} fit in memory"
            )
        self.state = load_rom(create_state(self.rng), rom_data)
        self.cycles = 0
        self.logger.info(f"Loaded ROM ({len(rom_data)} bytes)")

    def execute(self, instruction: int, framebuffer: Framebuffer, keypad: Keypad):
        """Execute one instruction word without fetching or ticking timers."""
        self.state = execute(self.state, instruction, framebuffer, keypad)

    def execute_one_cycle(self, framebuffer: Framebuffer, keypad: Keypad):
        """Fetch, decode and execute one instruction, then tick the timers.

        On a fault the interpreter state is left as it was before the call.

        Raises:
            RuntimeFault: The fetched word is unknown, unsupported, or
                over/underflows the call stack.
        """
        address = self.state.pc & ADDRESS_MASK
        state, instruction = fetch(self.state)

        if self.logger.is_enabled_for("DEBUG"):
            self.logger.debug(f"0x{address:03X}: {instruction:04X}")

        try:
            state = execute(state, instruction, framebuffer, keypad)
        except RuntimeFault as fault:
            fault.address = address
            self.logger.error(str(fault))
            raise

        self.state = tick_timers(state)
        self.cycles += 1

    @property
    def pc(self) -> int:
        return self.state.pc

    @property
    def index(self) -> int:
        return self.state.I

    @property
    def registers(self) -> tuple[int, ...]:
        return tuple(int(v) for v in self.state.V)

    @property
    def stack_pointer(self) -> int:
        return self.state.stack.pointer

    @property
    def delay_timer(self) -> int:
        return self.state.delay_timer

    @property
    def sound_timer(self) -> int:
        return self.state.sound_timer

    @property
    def sound_active(self) -> bool:
        """True while the sound timer is running."""
        return self.state.sound_timer > 0

    @property
    def memory(self) -> bytes:
        return bytes(self.state.memory.tolist())

    def __repr__(self) -> str:
        return (
            f"Interpreter(pc=0x{self.pc:03X}, I=0x{self.index:03X}, "
            f"sp={self.stack_pointer}, cycles={self.cycles})"
        )
