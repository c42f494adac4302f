"""Shared types for golden-palette: RGB, HSL, Palette, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

PALETTE_SIZE = 10


class RGB(NamedTuple):
    """Integer red/green/blue triple, each channel in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness as percentages [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class Palette:
    """The ten colours derived from one base colour, addressable by slot 1..10.

    Immutable. A new base colour produces a new Palette.
    """

    base: str  # normalised '#rrggbb' form of the input
    colours: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.colours) != PALETTE_SIZE:
            raise ValueError(f'Palette needs exactly {PALETTE_SIZE} colours, got {len(self.colours)}')

    def __getitem__(self, slot: int) -> str:
        if not 1 <= slot <= PALETTE_SIZE:
            raise KeyError(f'Palette slot out of range: {slot} (expected 1..{PALETTE_SIZE})')
        return self.colours[slot - 1]

    def __len__(self) -> int:
        return PALETTE_SIZE

    def __iter__(self) -> Iterator[int]:
        return iter(range(1, PALETTE_SIZE + 1))

    def items(self) -> list[tuple[int, str]]:
        return list(enumerate(self.colours, start=1))

    def to_dict(self) -> dict[str, str]:
        """Keyed as color1..color10, the shape callers assign roles from."""
        return {f'color{slot}': hex_colour for slot, hex_colour in self.items()}


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='generate', help='Print the ten palette slots')

        @command.run
        def run(args, report):
            ...

    Commands needing extra CLI options register them with @command.arguments.
    """

    def __init__(self, name: str, help: str = '', takes_base: bool = True):
        self.name = name
        self.help = help
        self.takes_base = takes_base  # accepts the optional [base] positional
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function that adds options to the subparser."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    base: str | None = None
    palette: Palette | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)

    def add(self, section: str, data: dict[str, Any]) -> None:
        """Add (or merge into) a named result section."""
        self.sections.setdefault(section, {}).update(data)

    def note(self, message: str) -> None:
        self.messages.append(message)
