"""Standalone command: show the effective configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from welcomer.commands._base import WelcomerCommand

if TYPE_CHECKING:
    from welcomer.commands._context import AppContext


@click.command(
    "config",
    cls=WelcomerCommand,
    examples="""\
  welcomer config
  welcomer config --json
  WELCOMER_APP__MIN_AGE=18 welcomer config""",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.pass_obj
def config_cmd(app: AppContext, json_output: bool) -> None:
    """Show limits and message templates after all overrides."""
    from welcomer.output.renderers import render_settings, settings_json

    if json_output:
        click.echo(settings_json(app.settings))
    else:
        click.echo(render_settings(app.settings))
