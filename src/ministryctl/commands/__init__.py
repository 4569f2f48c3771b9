"""Subcommand modules for ministryctl.

Provides register_commands() which uses deferred imports to keep
``ministryctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from ministryctl.commands.birthdays import birthdays
    from ministryctl.commands.meeting import meeting
    from ministryctl.commands.members import members

    cli.add_command(birthdays)
    cli.add_command(members)
    cli.add_command(meeting)
