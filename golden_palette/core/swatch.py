"""Render a palette as a horizontal strip of ten equal-width blocks."""

import numpy as np
from PIL import Image

from golden_palette.core.codec import decode_hex
from golden_palette.core.types import Palette


def render_swatch(palette: Palette, width: int = 1000, height: int = 100) -> Image.Image:
    """Build the strip as an RGB image. Any remainder width goes to the last block."""
    n = len(palette)
    if width < n or height < 1:
        raise ValueError(f'Swatch must be at least {n}x1 pixels, got {width}x{height}')

    arr = np.zeros((height, width, 3), dtype=np.uint8)
    block = width // n
    for slot in palette:
        x1 = (slot - 1) * block
        x2 = width if slot == n else x1 + block
        arr[:, x1:x2] = decode_hex(palette[slot])

    return Image.fromarray(arr)


def swatch_filename(palette: Palette) -> str:
    return f'palette-{palette.base.lstrip("#")}.png'
