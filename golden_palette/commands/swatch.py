"""Export the palette as a PNG strip of ten equal-width blocks.

Saves <out_dir>/palette-<rrggbb>.png, slot 1 on the left.

Example:
    golden-palette swatch '#FF0000' -o ./tmp
    golden-palette swatch '#FF0000' -o ./tmp --width 500 --height 50
"""

import os

from golden_palette.core.palette import generate_palette
from golden_palette.core.swatch import render_swatch, swatch_filename
from golden_palette.core.types import Command, Report

command = Command(
    name='swatch',
    help='Export the palette as a PNG strip.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-o', '--out-dir', default='.', help='Directory for the PNG (default: cwd)')
    parser.add_argument('--width', type=int, default=1000, help='Image width in pixels (default: 1000)')
    parser.add_argument('--height', type=int, default=100, help='Image height in pixels (default: 100)')


@command.run
def run(args, report: Report) -> None:
    palette = generate_palette(args.base)
    image = render_swatch(palette, width=args.width, height=args.height)

    os.makedirs(args.out_dir, exist_ok=True)
    path = os.path.join(args.out_dir, swatch_filename(palette))
    image.save(path)

    report.base = palette.base
    report.add('swatch', {'file': path, 'width': image.width, 'height': image.height})
