"""CHIP-8 engine errors."""

from typing import Optional


class Chip8Error(Exception):
    """Base class for errors raised by the interpreter engine."""
    pass


class UnknownOpcodeError(Chip8Error):
    """Instruction word matches no entry of the CHIP-8 opcode table."""

    def __init__(self, opcode: int, address: Optional[int] = None):
        self.opcode = opcode
        self.address = address
        where = f" at 0x{address:03X}" if address is not None else ""
        super().__init__(f"Unknown opcode 0x{opcode:04X}{where}")


class StackOverflowError(Chip8Error):
    """Subroutine call with the call stack already full."""
    pass


class StackUnderflowError(Chip8Error):
    """Subroutine return with an empty call stack."""
    pass


class ProgramTooLargeError(Chip8Error, ValueError):
    """Program does not fit between PROGRAM_START and the end of memory."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Program is {size} bytes, at most {limit} bytes fit in memory")


class InvalidKeyError(Chip8Error, IndexError):
    """Key index outside the 16-key keypad."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Key index {index} out of range (0x0-0xF)")
