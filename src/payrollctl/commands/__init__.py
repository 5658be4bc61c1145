"""Subcommand modules for payrollctl.

Provides register_commands(), which attaches every subcommand to the
root group. ``menu`` is also the group's default command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from payrollctl.commands.menu import menu

    cli.add_command(menu)
