"""Run generate and roles, combined into a single report.

Skips: swatch (writes files — run explicitly), library (stateful).

Example:
    golden-palette all '#FF0000'
    golden-palette all '#FF0000' --json
"""

from golden_palette.core.types import Command, Report

command = Command(
    name='all',
    help='Run generate and roles. Combine into a single report.',
)

# Commands never run automatically
SKIP = {'all', 'swatch', 'library'}


@command.run
def run(args, report: Report) -> None:
    from golden_palette.registry import all_commands

    for name, cmd in sorted(all_commands().items()):
        if name in SKIP:
            continue
        cmd.execute(args, report)
