"""CHIP-8 virtual machine package."""

from chip8vm.state import EmulatorState, StackState, create_state
from chip8vm.emulator import (
    execute, fetch, step, tick_timers, load_program, press_key, get_screen
)
from chip8vm.decode import DecodedInstruction, decode
from chip8vm.errors import (
    Chip8Error, UnknownOpcodeError, StackOverflowError, StackUnderflowError,
    ProgramTooLargeError, InvalidKeyError,
)
from chip8vm.interpreter import Interpreter
from chip8vm.logging import ConsoleLogger
from chip8vm.constants import *
from chip8vm.rendering import chip8_display_to_rgb, create_color_scheme

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "tick_timers",
    "load_program",
    "press_key",
    "get_screen",
    "DecodedInstruction",
    "decode",
    "Interpreter",
    "ConsoleLogger",
    "Chip8Error",
    "UnknownOpcodeError",
    "StackOverflowError",
    "StackUnderflowError",
    "ProgramTooLargeError",
    "InvalidKeyError",
    "MEMORY_SIZE",
    "PROGRAM_START",
    "MAX_PROGRAM_SIZE",
    "FONT_START",
    "FONT_DATA",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "STACK_SIZE",
    "TICKS_PER_FRAME",
    "chip8_display_to_rgb",
    "create_color_scheme",
]
