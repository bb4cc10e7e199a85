"""Tests for control flow instructions."""

import pytest
from chip8vm import execute, UnknownOpcodeError


class TestJump:
    """Test jump instructions."""

    def test_execute_jump(self, fresh_state):
        """Test 1NNN - Jump to address."""
        state = execute(fresh_state, 0x1001)
        assert state.pc == 1

    def test_jump_masks_address(self, fresh_state):
        """1NNN - Only the low 12 bits form the target."""
        state = execute(fresh_state, 0x1111)
        assert state.pc == 0x111


class TestSkipInstructions:
    """Test all skip instruction variants."""

    def test_skip_if_equal_immediate_true(self, loaded_state):
        """3XNN - Should skip when VX == NN."""
        state = loaded_state.replace(V=loaded_state.V.at[5].set(0x42))
        initial_pc = state.pc

        state = execute(state, 0x3542)  # Skip if V5 == 0x42
        assert state.pc == initial_pc + 2

    def test_skip_if_equal_immediate_false(self, loaded_state):
        """3XNN - Should not skip when VX != NN."""
        state = loaded_state.replace(V=loaded_state.V.at[5].set(0x41))
        initial_pc = state.pc

        state = execute(state, 0x3542)
        assert state.pc == initial_pc

    def test_skip_if_not_equal_immediate_true(self, loaded_state):
        """4XNN - Should skip when VX != NN."""
        state = loaded_state.replace(V=loaded_state.V.at[1].set(0x55))

        state = execute(state, 0x4144)  # Skip if V1 != 0x44
        assert state.pc == 0x202

    def test_skip_if_not_equal_immediate_false(self, loaded_state):
        """4XNN - Should not skip when VX == NN."""
        state = loaded_state.replace(V=loaded_state.V.at[3].set(0x20))

        state = execute(state, 0x4320)
        assert state.pc == 0x200

    def test_skip_if_equal_register_true(self, loaded_state):
        """5XY0 - Should skip when VX == VY."""
        state = loaded_state
        state = state.replace(V=state.V.at[1].set(0x55))
        state = state.replace(V=state.V.at[2].set(0x55))

        state = execute(state, 0x5120)
        assert state.pc == 0x202

    def test_skip_if_equal_register_false(self, loaded_state):
        """5XY0 - Should not skip when VX != VY."""
        state = loaded_state
        state = state.replace(V=state.V.at[1].set(0x55))
        state = state.replace(V=state.V.at[2].set(0x44))

        state = execute(state, 0x5120)
        assert state.pc == 0x200

    def test_skip_if_not_equal_register_true(self, loaded_state):
        """9XY0 - Should skip when VX != VY."""
        state = loaded_state
        state = state.replace(V=state.V.at[1].set(0x33))
        state = state.replace(V=state.V.at[2].set(0x54))

        state = execute(state, 0x9120)
        assert state.pc == 0x202

    def test_skip_if_not_equal_register_false(self, loaded_state):
        """9XY0 - Should not skip when VX == VY."""
        state = loaded_state
        state = state.replace(V=state.V.at[7].set(0xCC))
        state = state.replace(V=state.V.at[8].set(0xCC))

        state = execute(state, 0x9780)
        assert state.pc == 0x200

    @pytest.mark.parametrize("instruction", [0x5121, 0x512F, 0x9121, 0x912E])
    def test_register_skips_require_zero_suffix(self, loaded_state, instruction):
        """5XYN / 9XYN with N != 0 are unknown opcodes."""
        with pytest.raises(UnknownOpcodeError):
            execute(loaded_state, instruction)

    def test_skip_with_zero_values(self, loaded_state):
        """V0 == 0 on a fresh machine, so 3000 skips."""
        state = execute(loaded_state, 0x3000)
        assert state.pc == 0x202

    def test_skip_boundary_values(self, loaded_state):
        """Test skip instructions with boundary values."""
        state = loaded_state.replace(V=loaded_state.V.at[0].set(0xFF))

        state = execute(state, 0x30FF)  # Skip if V0 == 255
        assert state.pc == 0x202


class TestJumpWithOffset:
    """Test BNNN."""

    def test_jump_with_offset(self, fresh_state):
        """BNNN - Jump with V0 offset."""
        state = execute(fresh_state, 0x6010)  # V0 = 0x10
        state = execute(state, 0xB250)
        assert state.pc == 0x260

    def test_jump_with_offset_ignores_other_registers(self, fresh_state):
        """BNNN always adds V0, never VX."""
        state = execute(fresh_state, 0x6010)  # V0 = 0x10
        state = execute(state, 0x6230)  # V2 = 0x30
        state = execute(state, 0xB250)
        assert state.pc == 0x260

    def test_jump_with_offset_wraps_to_12_bits(self, fresh_state):
        """BNNN - Target is masked to 12 bits."""
        state = execute(fresh_state, 0x60FF)
        state = execute(state, 0xBFFF)
        assert state.pc == (0xFFF + 0xFF) & 0xFFF


class TestKeySkips:
    """Test EX9E / EXA1."""

    def test_skip_if_key_pressed(self, loaded_state):
        """EX9E - Skip if key pressed."""
        state = execute(loaded_state, 0x6005)  # V0 = 5
        state = state.replace(keypad=state.keypad.at[5].set(True))

        state = execute(state, 0xE09E)
        assert state.pc == 0x202

    def test_no_skip_if_key_released(self, loaded_state):
        """EX9E - Do not skip when the key is up."""
        state = execute(loaded_state, 0x6005)

        state = execute(state, 0xE09E)
        assert state.pc == 0x200

    def test_skip_if_key_not_pressed(self, loaded_state):
        """EXA1 - Skip if key not pressed."""
        state = execute(loaded_state, 0x6005)

        state = execute(state, 0xE0A1)
        assert state.pc == 0x202

    def test_no_skip_if_key_held(self, loaded_state):
        """EXA1 - Do not skip when the key is down."""
        state = execute(loaded_state, 0x600C)
        state = state.replace(keypad=state.keypad.at[0xC].set(True))

        state = execute(state, 0xE0A1)
        assert state.pc == 0x200

    def test_key_index_uses_low_nibble(self, loaded_state):
        """Register values above 0xF select key VX & 0xF."""
        state = execute(loaded_state, 0x6013)  # V0 = 0x13 -> key 3
        state = state.replace(keypad=state.keypad.at[3].set(True))

        state = execute(state, 0xE09E)
        assert state.pc == 0x202

    @pytest.mark.parametrize("instruction", [0xE09F, 0xE0A2, 0xE000])
    def test_unknown_key_instruction(self, loaded_state, instruction):
        with pytest.raises(UnknownOpcodeError):
            execute(loaded_state, instruction)
