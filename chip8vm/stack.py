"""CHIP-8 stack operations."""

import jax.numpy as jnp
from chip8vm.constants import ADDRESS_MASK, STACK_SIZE
from chip8vm.errors import StackOverflowError, StackUnderflowError
from chip8vm.state import StackState


def push(stack: StackState, address: jnp.ndarray) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(f"Call stack full ({STACK_SIZE} entries)")
    masked_address = jnp.astype(address, jnp.uint16) & ADDRESS_MASK
    new_data = stack.data.at[stack.pointer].set(masked_address)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, jnp.ndarray]:
    """Pop address from stack."""
    if stack.pointer <= 0:
        raise StackUnderflowError("Return with an empty call stack")
    new_pointer = stack.pointer - 1
    popped_address = stack.data[new_pointer]
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address
