"""Tests for display rendering helpers."""

import numpy as np
import pytest
from chip8vm import chip8_display_to_rgb, create_color_scheme, get_screen


def test_display_to_rgb_colors(fresh_state):
    display = fresh_state.display.at[1, 2].set(True)

    rgb = chip8_display_to_rgb(display, scale=1, on_color=(0, 255, 0), off_color=(1, 2, 3))

    assert rgb.shape == (32, 64, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[1, 2]) == (0, 255, 0)
    assert tuple(rgb[0, 0]) == (1, 2, 3)


def test_display_to_rgb_upscales(fresh_state):
    display = fresh_state.display.at[31, 63].set(True)

    rgb = chip8_display_to_rgb(display, scale=4)

    assert rgb.shape == (128, 256, 3)
    assert (rgb[124:, 252:] == 255).all()
    assert (rgb[:124, :252] == 0).all()


def test_display_to_rgb_accepts_screen_snapshot(fresh_state):
    rgb = chip8_display_to_rgb(get_screen(fresh_state), scale=2)
    assert rgb.shape == (64, 128, 3)


def test_display_to_rgb_rejects_bad_shape():
    with pytest.raises(ValueError):
        chip8_display_to_rgb(np.zeros((64, 32), dtype=bool))


def test_color_schemes():
    assert create_color_scheme("classic") == ((255, 255, 255), (0, 0, 0))
    with pytest.raises(ValueError, match="Unknown color scheme"):
        create_color_scheme("sepia")

