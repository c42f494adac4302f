"""Command discovery.

Imports every public module in golden_palette.commands and keeps the
ones that define a `command` object of type Command, keyed by its name.
"""

import importlib
import pkgutil

import golden_palette.commands as commands_pkg
from golden_palette.core.types import Command

_registry: dict[str, Command] = {}


def _command_modules() -> list[str]:
    found = pkgutil.iter_modules(commands_pkg.__path__)
    return sorted(name for _finder, name, _ispkg in found if not name.startswith('_'))


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if not _registry:
        for modname in _command_modules():
            module = importlib.import_module(f'{commands_pkg.__name__}.{modname}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    """Get a command by name. Raises KeyError listing the known names."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    return discover()
