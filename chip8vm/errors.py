"""Exceptions raised by the CHIP-8 interpreter."""

from typing import Optional


class Chip8Error(Exception):
    """Base class for all chip8vm errors."""


class RomLoadError(Chip8Error):
    """The program byte source could not be read."""


class RuntimeFault(Chip8Error):
    """An instruction could not be executed.

    Attributes:
        opcode: The 16-bit instruction word that faulted.
        address: Address the word was fetched from. Filled in by the
            interpreter when the fault escapes a fetched cycle.
    """

    def __init__(self, opcode: int, address: Optional[int] = None):
        super().__init__(opcode, address)
        self.opcode = opcode
        self.address = address

    def describe(self) -> str:
        return f"Runtime fault on opcode 0x{self.opcode:04X}"

    def __str__(self) -> str:
        message = self.describe()
        if self.address is not None:
            message += f" at 0x{self.address:03X}"
        return message


class UnknownOpcode(RuntimeFault):
    """Instruction word matches no known pattern."""

    def describe(self) -> str:
        return f"Unknown opcode 0x{self.opcode:04X}"


class UnsupportedFeature(RuntimeFault):
    """0NNN - machine-language routine call, recognised but not emulated."""

    def describe(self) -> str:
        return f"Machine-language call 0x{self.opcode:04X} is not supported"


class StackOverflow(RuntimeFault):
    """Subroutine call with every stack slot in use."""

    def describe(self) -> str:
        return f"Stack overflow on call 0x{self.opcode:04X}"


class StackUnderflow(RuntimeFault):
    """Return with an empty stack."""

    def describe(self) -> str:
        return f"Return 0x{self.opcode:04X} with an empty stack"
