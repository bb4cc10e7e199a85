"""CHIP-8 ALU operations (8xxx)."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.constants import FLAG_REGISTER
from chip8vm.errors import UnknownOpcodeError


def alu_set(vx, vy):
    """8XY0 - Set: VX = VY."""
    return vy


def alu_or(vx, vy):
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy


def alu_and(vx, vy):
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy


def alu_xor(vx, vy):
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy


def alu_add(vx, vy):
    """8XY4 - Add: VX += VY, set carry flag."""
    result = vx + vy
    carry = jnp.astype(result > 0xFF, jnp.int32)
    return result & 0xFF, carry


def alu_sub_xy(vx, vy):
    """8XY5 - Subtract: VX -= VY, VF = 0 on borrow."""
    no_borrow = jnp.astype(vx >= vy, jnp.int32)
    return (vx - vy) & 0xFF, no_borrow


def alu_shift_right(vx, vy):
    """8XY6 - Shift right: VX >>= 1, VF = shifted out bit."""
    return vx >> 1, vx & 1


def alu_sub_yx(vx, vy):
    """8XY7 - Subtract: VX = VY - VX, VF = 0 on borrow."""
    no_borrow = jnp.astype(vy >= vx, jnp.int32)
    return (vy - vx) & 0xFF, no_borrow


def alu_shift_left(vx, vy):
    """8XYE - Shift left: VX <<= 1, VF = shifted out bit."""
    return (vx << 1) & 0xFF, (vx >> 7) & 1


# Operations that leave VF untouched
LOGIC_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
}

# Operations returning (result, flag)
FLAG_OPERATIONS = {
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """8XYN - ALU operations dispatcher.

    For 8XY4..8XYE with X = F the flag wins: VF ends up holding the flag, not
    the arithmetic result. Interpreters that write VF first keep the result.
    """
    vx = jnp.astype(state.V[instruction.x], jnp.int32)
    vy = jnp.astype(state.V[instruction.y], jnp.int32)

    if instruction.n in LOGIC_OPERATIONS:
        result = LOGIC_OPERATIONS[instruction.n](vx, vy)
        return state.replace(V=state.V.at[instruction.x].set(jnp.astype(result, jnp.uint8)))

    if instruction.n not in FLAG_OPERATIONS:
        raise UnknownOpcodeError(instruction.raw)

    result, vf = FLAG_OPERATIONS[instruction.n](vx, vy)
    # Flag is written last so VF holds it even when X is F
    new_V = state.V.at[instruction.x].set(jnp.astype(result, jnp.uint8))
    new_V = new_V.at[FLAG_REGISTER].set(jnp.astype(vf, jnp.uint8))
    return state.replace(V=new_V)
