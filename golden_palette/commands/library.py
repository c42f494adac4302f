"""Manage the saved base colour library.

Actions:
  list              show saved colours, * marks the selected one
  add <colour>      save a colour (duplicates are ignored, case-insensitive)
  select <colour>   make a colour the default base for other commands
  delete <id>       remove an entry; an emptied library is reseeded with #FF0000

The library file defaults to ~/.golden_palette.json, overridden by
GOLDEN_PALETTE_LIBRARY or --library.

Example:
    golden-palette library add '#3A7BD5'
    golden-palette library select '#3A7BD5'
    golden-palette generate        # uses the selected colour
"""

import sys

from golden_palette.core.codec import normalize_hex, normalize_hex_input
from golden_palette.core.library import load_library
from golden_palette.core.types import Command, Report

command = Command(
    name='library',
    help='List, add, select or delete saved base colours.',
    takes_base=False,
)

ACTIONS = ('list', 'add', 'select', 'delete')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('action', choices=ACTIONS, nargs='?', default='list', help='Library action (default: list)')
    parser.add_argument('value', nargs='?', help='Colour for add/select, id for delete')


def _require_value(args) -> str:
    if not args.value:
        print(f'Error: library {args.action} needs a value', file=sys.stderr)
        sys.exit(1)
    return normalize_hex_input(args.value, complete=True) if args.complete else args.value


@command.run
def run(args, report: Report) -> None:
    lib = load_library(args.library_path)

    if args.action == 'add':
        colour = normalize_hex(_require_value(args))
        if lib.add(colour):
            report.note(f'added {colour}')
        else:
            report.note(f'{colour} already saved')
    elif args.action == 'select':
        lib.select(_require_value(args))
        report.note(f'selected {lib.selected}')
    elif args.action == 'delete':
        value = args.value or ''
        try:
            colour_id = int(value)
        except ValueError:
            print(f'Error: delete needs a numeric id, got {value!r}', file=sys.stderr)
            sys.exit(1)
        if not lib.delete(colour_id):
            report.note(f'no entry with id {colour_id}')

    if args.action != 'list':
        lib.save(args.library_path)
    report.add('library', lib.to_dict())
