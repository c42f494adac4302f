"""Hex <-> RGB <-> HSL conversion.

Hex strings are '#rrggbb' or 'rrggbb', case-insensitive. The 3-digit
shorthand ('#fff') and named colours are rejected.

RGB channels are integers in [0, 255]. HSL hue is in degrees [0, 360),
saturation and lightness are percentages [0, 100].
"""

import math
import re

from golden_palette.core.types import HSL, RGB

_HEX_RE = re.compile(r'#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})', re.IGNORECASE)
_INPUT_STRIP_RE = re.compile(r'[^#0-9A-F]')


class InvalidHexInput(ValueError):
    """Raised when a string is not a 6-digit hex colour."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'Invalid hex colour: {value!r} (expected #rrggbb or rrggbb)')


def decode_hex(value: str) -> RGB:
    """Parse '#rrggbb' / 'rrggbb' into an RGB triple. Raises InvalidHexInput."""
    m = _HEX_RE.fullmatch(value) if isinstance(value, str) else None
    if m is None:
        raise InvalidHexInput(value)
    return RGB(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def encode_hex(rgb: tuple[int, int, int]) -> str:
    """Format an RGB triple as lowercase '#rrggbb'. Channels are not clamped."""
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def normalize_hex(value: str) -> str:
    """Return the lowercase '#rrggbb' form of a valid hex colour."""
    return encode_hex(decode_hex(value))


def normalize_hex_input(text: str, complete: bool = False) -> str:
    """Tidy free-form text typed into a hex field.

    Uppercases, drops anything but '#' and hex digits, adds the leading '#'
    and truncates to 7 characters. With complete=True a partial value such
    as '#F8' is right-padded with zeros to '#F80000'. The result may still
    be invalid and must go through decode_hex.
    """
    value = _INPUT_STRIP_RE.sub('', text.upper())
    if value and not value.startswith('#'):
        value = '#' + value
    value = value[:7]
    if complete and value.startswith('#') and 1 < len(value) < 7:
        value = value.ljust(7, '0')
    return value


def rgb_to_hsl(rgb: tuple[int, int, int]) -> HSL:
    r, g, b = (c / 255 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2

    if mx == mn:
        return HSL(0.0, 0.0, lightness * 100)

    d = mx - mn
    saturation = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)

    if mx == r:
        # g < b lands in the top sixth of the wheel: shift by 6 sectors
        hue = ((g - b) / d + (6 if g < b else 0)) / 6
    elif mx == g:
        hue = ((b - r) / d + 2) / 6
    else:
        hue = ((r - g) / d + 4) / 6

    degrees = (hue * 360) % 360
    return HSL(degrees, saturation * 100, lightness * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def hsl_to_rgb(hsl: tuple[float, float, float]) -> RGB:
    """Convert HSL (degrees, %, %) to an RGB triple, rounding half up."""
    h, s, l = hsl  # noqa: E741
    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))
