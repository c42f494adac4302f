"""Derive the ten-slot golden-ratio palette from a base colour.

Slots (all derived from the base colour's HSL, never from each other):
  1 base, 2 hue +137.5, 3 desaturate 60%, 4 hue +222.5, 5 hue +275,
  6 hue +52.5, 7 desaturate 38.2%, 8 desaturate 23.6%,
  9 lighten 38.2%, 10 darken 38.2%

Each slot is printed as hex, rgb() and hsl().

Example:
    golden-palette generate '#FF0000'
    golden-palette generate 3a7bd5 --json
"""

from golden_palette.core.palette import generate_palette
from golden_palette.core.types import Command, Report

command = Command(
    name='generate',
    help='Derive the ten-slot palette from a base colour.',
)


@command.run
def run(args, report: Report) -> None:
    palette = generate_palette(args.base)
    report.base = palette.base
    report.palette = palette
