"""CHIP-8 control flow instructions."""

import jax
import jax.lax
import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.constants import ADDRESS_MASK
from chip8vm.errors import UnknownOpcodeError
from chip8vm.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.asarray(instruction.nnn, dtype=jnp.uint16))


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn, suffix=None):
    """Factory for skip instructions.

    When ``suffix`` is given, the low nibble of the instruction must equal it.
    """
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        if suffix is not None and instruction.n != suffix:
            raise UnknownOpcodeError(instruction.raw)
        condition = condition_fn(state, instruction)
        return jax.lax.cond(
            condition,
            lambda s: s.replace(pc=s.pc + 2),
            lambda s: s,
            state
        )
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == state.V[inst.y], suffix=0x0
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != state.V[inst.y], suffix=0x0
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = (instruction.nnn + jnp.astype(state.V[0], jnp.uint16)) & ADDRESS_MASK
    return state.replace(pc=jnp.astype(jump_address, jnp.uint16))


KEY_SKIP_SUFFIXES = (0x9E, 0xA1)


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn not in KEY_SKIP_SUFFIXES:
        raise UnknownOpcodeError(instruction.raw)

    key_index = state.V[instruction.x] & 0xF
    key_pressed = state.keypad[key_index]
    is_not_instruction = (instruction.nn == 0xA1)
    condition = key_pressed ^ is_not_instruction

    return jax.lax.cond(
        condition,
        lambda state: state.replace(pc=state.pc + 2),
        lambda state: state,
        state
    )
