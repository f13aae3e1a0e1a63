"""Subcommand modules for annoguide.

register_commands() imports command modules lazily so ``annoguide --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from annoguide.commands.api import demo, get_post, get_user
    from annoguide.commands.decode import decode

    cli.add_command(get_user)
    cli.add_command(get_post)
    cli.add_command(demo)
    cli.add_command(decode)
