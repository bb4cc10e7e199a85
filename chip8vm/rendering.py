"""CHIP-8 rendering utilities for front ends."""

from typing import Tuple

import numpy as np

from chip8vm.constants import SCREEN_WIDTH, SCREEN_HEIGHT

COLOR_SCHEMES = {
    "classic": ((255, 255, 255), (0, 0, 0)),  # White on black
    "green": ((0, 255, 0), (0, 0, 0)),  # Green on black
    "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
    "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
    "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
}


def chip8_display_to_rgb(
    display: np.ndarray,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (255, 255, 255),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert CHIP-8 boolean display to RGB array with optional upscaling.

    Args:
        display: Boolean array of shape (32, 64), rows first
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: white)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (32*scale, 64*scale, 3) with uint8 values
    """
    if scale < 1:
        raise ValueError(f"scale must be a positive integer, got {scale}")

    pixels = np.asarray(display, dtype=np.bool_)
    if pixels.shape != (SCREEN_HEIGHT, SCREEN_WIDTH):
        raise ValueError(
            f"Expected display shape ({SCREEN_HEIGHT}, {SCREEN_WIDTH}), got {pixels.shape}"
        )

    rgb_frame = np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH, 3), dtype=np.uint8)
    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Nearest neighbor upscaling
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("classic", "green", "amber", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    if scheme not in COLOR_SCHEMES:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(COLOR_SCHEMES.keys())}"
        )

    return COLOR_SCHEMES[scheme]
