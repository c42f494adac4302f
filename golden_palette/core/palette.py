"""Ten-colour palette derivation anchored to golden-ratio constants.

Every slot is derived from the base colour's HSL, never from another slot:

    1   base colour
    2   hue +137.5   (golden angle, 360/phi^2)
    3   desaturate 60%
    4   hue +222.5   (360/phi)
    5   hue +275     (137.5 x 2)
    6   hue +52.5    (137.5 / phi)
    7   desaturate 38.2%
    8   desaturate 23.6%
    9   lighten 38.2%  (relative)
    10  darken 38.2%   (relative)

Showcase roles map semantic names onto slots the way the palette is
consumed by a UI: primary, accent, light and dark variants, and so on.
"""

from collections.abc import Callable

from golden_palette.core.codec import decode_hex, encode_hex, hsl_to_rgb, rgb_to_hsl
from golden_palette.core.contrast import text_colour
from golden_palette.core.transforms import adjust_lightness, desaturate, rotate_hue
from golden_palette.core.types import HSL, Palette

GOLDEN_ANGLE = 137.5  # 360 / phi^2
GOLDEN_ANGLE_2 = 222.5  # 360 / phi
GOLDEN_ANGLE_3 = 275.0  # 137.5 x 2
GOLDEN_ANGLE_4 = 52.5  # 137.5 / phi


def _identity(hsl: HSL) -> HSL:
    return hsl


def _hue(delta: float) -> Callable[[HSL], HSL]:
    def apply(hsl: HSL) -> HSL:
        return HSL(rotate_hue(hsl.h, delta), hsl.s, hsl.l)

    return apply


def _saturation(percent: float) -> Callable[[HSL], HSL]:
    def apply(hsl: HSL) -> HSL:
        return HSL(hsl.h, desaturate(hsl.s, percent), hsl.l)

    return apply


def _lightness(percent: float) -> Callable[[HSL], HSL]:
    def apply(hsl: HSL) -> HSL:
        return HSL(hsl.h, hsl.s, adjust_lightness(hsl.l, percent))

    return apply


# (slot, label, transform) in slot order
RECIPE: list[tuple[int, str, Callable[[HSL], HSL]]] = [
    (1, 'base', _identity),
    (2, f'hue +{GOLDEN_ANGLE}', _hue(GOLDEN_ANGLE)),
    (3, 'desaturate 60%', _saturation(60)),
    (4, f'hue +{GOLDEN_ANGLE_2}', _hue(GOLDEN_ANGLE_2)),
    (5, f'hue +{GOLDEN_ANGLE_3:g}', _hue(GOLDEN_ANGLE_3)),
    (6, f'hue +{GOLDEN_ANGLE_4}', _hue(GOLDEN_ANGLE_4)),
    (7, 'desaturate 38.2%', _saturation(38.2)),
    (8, 'desaturate 23.6%', _saturation(23.6)),
    (9, 'lighten 38.2%', _lightness(38.2)),
    (10, 'darken 38.2%', _lightness(-38.2)),
]

SLOT_LABELS = {slot: label for slot, label, _fn in RECIPE}

ROLES = {
    'primary': 1,
    'accent': 2,
    'muted': 3,
    'tertiary': 4,
    'gradient_end': 6,
    'surface': 8,
    'light': 9,
    'dark': 10,
}

GRADIENTS = [(1, 2), (4, 6)]

TINT_SLOT = 9
TINT_SUFFIX = '40'


def generate_palette(base: str) -> Palette:
    """Derive the ten-slot palette from a base hex colour.

    Raises InvalidHexInput if base is not '#rrggbb' / 'rrggbb'.
    """
    rgb = decode_hex(base)
    hsl0 = rgb_to_hsl(rgb)

    colours = []
    for slot, _label, transform in RECIPE:
        if slot == 1:
            # base passes through untouched, not via an HSL round trip
            colours.append(encode_hex(rgb))
            continue
        colours.append(encode_hex(hsl_to_rgb(transform(hsl0))))

    return Palette(base=encode_hex(rgb), colours=tuple(colours))


def with_alpha_suffix(hex_colour: str, suffix: str = TINT_SUFFIX) -> str:
    """Append a fixed 2-digit hex opacity to a '#rrggbb' colour ('#ff000040')."""
    if len(suffix) != 2 or any(c not in '0123456789abcdefABCDEF' for c in suffix):
        raise ValueError(f'Opacity suffix must be two hex digits, got {suffix!r}')
    return encode_hex(decode_hex(hex_colour)) + suffix.lower()


def css_gradient(start: str, end: str) -> str:
    return f'linear-gradient(90deg, {start}, {end})'


def palette_roles(palette: Palette) -> dict:
    """Resolve the showcase roles, gradients and tint for a palette."""
    roles = {}
    for role, slot in ROLES.items():
        colour = palette[slot]
        roles[role] = {'slot': slot, 'hex': colour, 'text': text_colour(colour)}

    gradients = [css_gradient(palette[a], palette[b]) for a, b in GRADIENTS]
    return {
        'roles': roles,
        'gradients': gradients,
        'tint': with_alpha_suffix(palette[TINT_SLOT]),
    }
