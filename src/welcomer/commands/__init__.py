"""Subcommand modules for welcomer.

Provides register_commands() which uses deferred imports to keep
``welcomer --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from welcomer.commands.config_cmd import config_cmd
    from welcomer.commands.run import run

    cli.add_command(run)
    cli.add_command(config_cmd)
