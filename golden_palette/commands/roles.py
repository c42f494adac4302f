"""Map palette slots onto showcase roles, with readable text colours.

Roles: primary (1), accent (2), muted (3), tertiary (4), gradient_end (6),
surface (8), light (9), dark (10). Each role reports black or white text
depending on the swatch brightness.

Also prints the two showcase gradients (1->2, 4->6) as CSS and a
translucent tint of the light variant (slot 9 + '40' opacity).

Example:
    golden-palette roles '#3A7BD5'
"""

from golden_palette.core.palette import generate_palette, palette_roles
from golden_palette.core.types import Command, Report

command = Command(
    name='roles',
    help='Map palette slots to UI roles with text colours, gradients and tint.',
)


@command.run
def run(args, report: Report) -> None:
    palette = generate_palette(args.base)
    report.base = palette.base
    report.add('roles', palette_roles(palette))
