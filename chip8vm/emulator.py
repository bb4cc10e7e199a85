"""Main CHIP-8 emulator execution engine."""

from typing import Sequence, Union

import jax.numpy as jnp
import numpy as np
from chip8vm.state import EmulatorState
from chip8vm.decode import decode
from chip8vm.constants import PROGRAM_START, MAX_PROGRAM_SIZE, ADDRESS_MASK, NUM_KEYS
from chip8vm.errors import UnknownOpcodeError, ProgramTooLargeError, InvalidKeyError
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

# Handlers indexed by the first nibble of the instruction
INSTRUCTION_TABLE = [
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
]


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    Raises:
        UnknownOpcodeError: if the instruction matches no opcode pattern.
    """
    decoded_instruction = decode(instruction)
    return INSTRUCTION_TABLE[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def fetch(state: EmulatorState) -> tuple[EmulatorState, jnp.uint16]:
    """Fetch next big-endian instruction word and advance the program counter.

    The program counter wraps from 0xFFE back to 0x000.
    """
    address = jnp.astype(state.pc, jnp.int32)
    instruction = _pack_u16(
        state.memory[address & ADDRESS_MASK],
        state.memory[(address + 1) & ADDRESS_MASK],
    )
    next_pc = jnp.astype((address + 2) & ADDRESS_MASK, jnp.uint16)
    return state.replace(pc=next_pc), instruction


def step(state: EmulatorState) -> EmulatorState:
    """Fetch and execute one instruction."""
    address = int(state.pc)
    state, instruction = fetch(state)
    try:
        return execute(state, int(instruction))
    except UnknownOpcodeError as e:
        raise UnknownOpcodeError(e.opcode, address) from None


def tick_timers(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Decrement non-zero delay and sound timers by one.

    Returns:
        Tuple of the new state and whether the sound timer just reached zero.
    """
    beep = int(state.sound_timer) == 1
    return state.replace(
        delay_timer=jnp.astype(jnp.maximum(jnp.astype(state.delay_timer, jnp.int32) - 1, 0), jnp.uint8),
        sound_timer=jnp.astype(jnp.maximum(jnp.astype(state.sound_timer, jnp.int32) - 1, 0), jnp.uint8),
    ), beep


def load_program(state: EmulatorState, program: Union[bytes, bytearray, Sequence[int]]) -> EmulatorState:
    """Copy program bytes into memory at 0x200 and point the program counter there."""
    program = bytes(program)
    if len(program) > MAX_PROGRAM_SIZE:
        raise ProgramTooLargeError(len(program), MAX_PROGRAM_SIZE)
    rom_array = jnp.array(np.frombuffer(program, dtype=np.uint8))
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(program)].set(rom_array)
    return state.replace(memory=new_memory, pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16))


def press_key(state: EmulatorState, index: int, pressed: bool) -> EmulatorState:
    """Set or clear one key of the keypad latch."""
    if not 0 <= index < NUM_KEYS:
        raise InvalidKeyError(index)
    return state.replace(keypad=state.keypad.at[index].set(bool(pressed)))


def get_screen(state: EmulatorState) -> np.ndarray:
    """Read-only (32, 64) boolean snapshot of the display."""
    screen = np.array(state.display, dtype=np.bool_)
    screen.flags.writeable = False
    return screen
