"""Test configuration and fixtures for CHIP-8 emulator tests."""

import io

import pytest
import jax.numpy as jnp
from chip8vm import create_state, Interpreter, ConsoleLogger, PROGRAM_START


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def loaded_state():
    """Fresh state with the program counter at the program start."""
    state = create_state()
    return state.replace(pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16))


@pytest.fixture
def log_stream():
    """In-memory stream capturing logger output."""
    return io.StringIO()


@pytest.fixture
def interpreter(log_stream):
    """Interpreter logging every level into ``log_stream``."""
    logger = ConsoleLogger(log_level="DEBUG", use_colors=False, show_timestamps=False, stream=log_stream)
    return Interpreter(logger=logger)


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )
