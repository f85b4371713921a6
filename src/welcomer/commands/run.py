"""Standalone command: run the interactive welcome workflow."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from welcomer.commands._base import WelcomerCommand
from welcomer.domain.types import Variant

if TYPE_CHECKING:
    from welcomer.commands._context import AppContext


@click.command(
    cls=WelcomerCommand,
    examples="""\
  welcomer run
  welcomer run --variant validated
  welcomer run --variant basic --worker
  printf 'Maria\\n40\\n' | welcomer run""",
)
@click.option(
    "--variant",
    type=click.Choice([v.value for v in Variant]),
    default=None,
    help="Workflow flavour (default: from config, else advanced).",
)
@click.option(
    "--worker/--no-worker",
    default=None,
    help="Run the workflow on a dedicated worker thread.",
)
@click.pass_obj
def run(app: AppContext, variant: str | None, worker: bool | None) -> None:
    """Ask for a name and an age, then print a greeting."""
    app.run_workflow(
        variant=Variant(variant) if variant else None,
        worker=worker,
    )
