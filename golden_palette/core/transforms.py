"""Pure numeric operations on HSL components."""


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def rotate_hue(h: float, delta: float) -> float:
    """Rotate a hue by delta degrees. Result is always in [0, 360)."""
    hue = (h + delta) % 360
    # float modulo of a tiny negative number yields exactly 360.0
    if hue >= 360:
        hue -= 360
    return hue


def desaturate(s: float, percent: float) -> float:
    """Reduce saturation by percent of its current value. Negative percent saturates."""
    return _clamp(s * (1 - percent / 100))


def adjust_lightness(l: float, percent: float) -> float:  # noqa: E741
    """Lighten (positive) or darken (negative) relative to the current lightness.

    Proportional, not additive: a lightness of 0 stays 0.
    """
    return _clamp(l + l * (percent / 100))
