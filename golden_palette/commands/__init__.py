"""CLI commands, one module each.

A module joins the CLI by defining a module-level `command` object;
golden_palette.registry finds it. The module docstring doubles as the
command's `golden-palette help <name>` text.
"""
