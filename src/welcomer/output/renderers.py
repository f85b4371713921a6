"""Renderers for the ``config`` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from welcomer.output.console import create_console, get_output

if TYPE_CHECKING:
    from welcomer.config.settings import WelcomerSettings


def render_settings(settings: WelcomerSettings, *, width: int | None = None) -> str:
    """Render the effective settings as a two-column table."""
    console = create_console(width=width)

    source = str(settings.config_path) if settings.config_path else "(defaults)"
    console.print(Text.assemble(("Config: ", "welcomer.title"), (source, "welcomer.path")))

    table = Table(show_header=True, header_style="welcomer.title", show_lines=True)
    table.add_column("Setting", style="welcomer.key", no_wrap=True)
    table.add_column("Value")

    table.add_row("variant", str(settings.variant))
    table.add_row("worker", str(settings.worker))
    table.add_row("log_level", settings.log_level or "(from --verbose)")
    for key, value in settings.app.model_dump().items():
        style = "welcomer.number" if isinstance(value, int) else "welcomer.template"
        table.add_row(f"app.{key}", Text(str(value), style=style))

    console.print(table)
    return get_output(console).rstrip("\n")


def settings_json(settings: WelcomerSettings) -> str:
    """Serialize the effective settings for ``--json``."""
    payload = settings.model_dump(mode="json", include={"variant", "worker", "app"})
    source = str(settings.config_path) if settings.config_path else None
    return json.dumps({"config_path": source, **payload}, indent=2, ensure_ascii=False)
