"""CHIP-8 display operations."""

import jax.numpy as jnp
from chip8vm.state import EmulatorState
from chip8vm.decode import DecodedInstruction
from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH, ADDRESS_MASK, FLAG_REGISTER

# Pre-computed (row, column) coordinate grids matching the display layout
yy, xx = jnp.meshgrid(jnp.arange(SCREEN_HEIGHT), jnp.arange(SCREEN_WIDTH), indexing='ij')


def sprite_mask(state: EmulatorState, instruction: DecodedInstruction) -> jnp.ndarray:
    """Boolean screen-sized mask of the pixels a DXYN sprite toggles.

    Sprite coordinates wrap around both screen edges.
    """
    sprite_x = jnp.astype(state.V[instruction.x], jnp.int32) % SCREEN_WIDTH
    sprite_y = jnp.astype(state.V[instruction.y], jnp.int32) % SCREEN_HEIGHT

    row_offset = (yy - sprite_y) % SCREEN_HEIGHT
    col_offset = (xx - sprite_x) % SCREEN_WIDTH
    in_sprite = (row_offset < instruction.n) & (col_offset < SPRITE_WIDTH)

    sprite_bytes = state.memory[(jnp.astype(state.I, jnp.int32) + row_offset) & ADDRESS_MASK]
    bit_index = jnp.where(in_sprite, (SPRITE_WIDTH - 1) - col_offset, 0)
    return (((sprite_bytes >> bit_index) & 1) == 1) & in_sprite


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N, VF = collision."""
    sprite = sprite_mask(state, instruction)
    collision = jnp.any(state.display & sprite)

    return state.replace(
        display=state.display ^ sprite,
        V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8))
    )
