"""Light/dark detection for choosing readable text over a swatch."""

from golden_palette.core.codec import InvalidHexInput, decode_hex

BLACK = '#000000'
WHITE = '#ffffff'

# YIQ-style perceived brightness threshold on the 0..255 scale
LIGHT_THRESHOLD = 128


def brightness(rgb: tuple[int, int, int]) -> float:
    r, g, b = rgb
    return (r * 299 + g * 587 + b * 114) / 1000


def is_light(hex_colour: str) -> bool:
    """True when the colour is bright enough for dark text. Invalid hex is treated as dark."""
    try:
        rgb = decode_hex(hex_colour)
    except InvalidHexInput:
        return False
    return brightness(rgb) > LIGHT_THRESHOLD


def text_colour(hex_colour: str) -> str:
    return BLACK if is_light(hex_colour) else WHITE
