"""golden-palette — golden-ratio colour palettes from a single base colour.

Usage: golden-palette <command> [base] [options]

Commands are auto-discovered from golden_palette/commands/.
Each command module's docstring is its documentation.
Run `golden-palette help <command>` for full module docs.

When [base] is omitted, the selected colour of the base colour library is
used if the library file exists, otherwise GOLDEN_PALETTE_BASE (#ff0000).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, golden-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys
from pathlib import Path

from golden_palette import registry
from golden_palette.core.codec import normalize_hex_input
from golden_palette.core.env import Settings, load_env, load_settings
from golden_palette.core.library import load_library
from golden_palette.core.report import format_json, format_text
from golden_palette.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'golden_palette.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  golden-palette generate '#FF0000'\n"
        '  golden-palette generate 3a7bd5 --json\n'
        "  golden-palette roles '#3A7BD5'\n"
        "  golden-palette swatch '#FF0000' -o ./tmp\n"
        "  golden-palette library add '#3A7BD5'\n"
        '  golden-palette all --complete \'#3A7\'\n'
        '  golden-palette help generate\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  GOLDEN_PALETTE_BASE     default base colour\n'
        '  GOLDEN_PALETTE_LIBRARY  library file (default ~/.golden_palette.json)\n'
    )
    parser = argparse.ArgumentParser(
        prog='golden-palette',
        description='Golden-ratio colour palettes from a single base colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        if cmd.takes_base:
            p.add_argument('base', nargs='?', help='Base colour, #rrggbb or rrggbb')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-c',
            '--complete',
            action='store_true',
            help="Tidy and zero-pad partial hex input ('#3a7' -> '#3A7000')",
        )
        p.add_argument('-l', '--library', metavar='PATH', help='Base colour library file')
        cmd.add_arguments(p)

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: golden-palette help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _resolve_base(args: argparse.Namespace, settings: Settings) -> str:
    """Base colour from the argument, else the library selection, else settings."""
    if args.base:
        return normalize_hex_input(args.base, complete=True) if args.complete else args.base
    if args.library_path.is_file():
        return load_library(args.library_path).selected
    return settings.base


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'golden-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    settings = load_settings()
    args.library_path = Path(args.library).expanduser() if args.library else settings.library_path

    cmd = registry.get(args.command)
    report = Report()
    try:
        if cmd.takes_base:
            args.base = _resolve_base(args, settings)
        cmd.execute(args, report)
    except ValueError as e:
        # InvalidHexInput, LibraryError and bad swatch sizes all land here
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
