"""CHIP-8 rendering utilities for visualization."""

from typing import Tuple

import jax.numpy as jnp
import numpy as np

Color = Tuple[int, int, int]

COLOR_SCHEMES = {
    "classic": ((130, 204, 221), (10, 61, 98)),  # Light blue on navy
    "green": ((0, 255, 0), (0, 0, 0)),  # Green on black
    "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
    "white": ((255, 255, 255), (0, 0, 0)),  # White on black
    "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
}


def framebuffer_to_rgb(
    pixels: jnp.ndarray,
    scale: int = 8,
    on_color: Color = (130, 204, 221),
    off_color: Color = (10, 61, 98),
) -> np.ndarray:
    """Convert a CHIP-8 pixel plane to an RGB array with optional upscaling.

    Args:
        pixels: Boolean array of shape (64, 32), indexed ``[x, y]``
        scale: Upscaling factor, each pixel becomes a scale x scale cell
        on_color: RGB color for lit pixels
        off_color: RGB color for dark pixels

    Returns:
        RGB array of shape (32*scale, 64*scale, 3) with uint8 values
    """
    lit = np.array(pixels, dtype=np.bool_)

    # (64 width, 32 height) -> image rows first: (32 height, 64 width)
    lit = lit.T
    height, width = lit.shape

    rgb_frame = np.empty((height, width, 3), dtype=np.uint8)
    rgb_frame[lit] = on_color
    rgb_frame[~lit] = off_color

    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def create_color_scheme(scheme: str = "classic") -> Tuple[Color, Color]:
    """Get predefined color schemes for CHIP-8 rendering.

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    if scheme not in COLOR_SCHEMES:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(COLOR_SCHEMES.keys())}"
        )

    return COLOR_SCHEMES[scheme]
