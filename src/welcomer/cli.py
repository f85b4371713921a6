"""Root CLI group for welcomer with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from welcomer import __version__
from welcomer.commands import register_commands
from welcomer.commands._context import AppContext
from welcomer.config.settings import WelcomerSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="welcomer")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """welcomer: ask for a name and an age, then say hello.

    Without a subcommand, runs the welcome workflow.
    """
    try:
        settings = WelcomerSettings.from_cli(
            config_path=config_path,
            verbose=verbose or None,
            log_json=log_json or None,
        )
    except ValidationError as exc:
        msg = f"Invalid configuration:\n{exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.obj.run_workflow()


register_commands(cli)
