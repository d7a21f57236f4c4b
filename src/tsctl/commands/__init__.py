"""Subcommand modules for tsctl.

register_commands() attaches every command to the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tsctl.commands.arith import add, shift, sub
    from tsctl.commands.compare import check, compare, equal
    from tsctl.commands.convert import from_ns, normalize, to_ns

    for command in (normalize, to_ns, from_ns, equal, compare, check, add, sub, shift):
        cli.add_command(command)
