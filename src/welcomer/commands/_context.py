"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to subcommands via
``@click.pass_obj``. Configures logging and builds the console-wired
WelcomeApplication.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from welcomer.config.logging import configure_logging
from welcomer.domain.types import Variant
from welcomer.handlers.console import ConsoleInputHandler, ConsoleOutputHandler
from welcomer.services.application import WelcomeApplication
from welcomer.services.worker import run_on_worker

if TYPE_CHECKING:
    from welcomer.config.settings import WelcomerSettings
    from welcomer.domain.user import UserData


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: WelcomerSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            level=settings.log_level,
        )

    def build_application(self, variant: Variant | None = None) -> WelcomeApplication:
        """Wire a WelcomeApplication to the console.

        The validated workflow reports rejections and errors on stderr,
        keeping stdout to prompts and the greeting.
        """
        variant = variant or self.settings.variant
        return WelcomeApplication(
            ConsoleInputHandler(),
            ConsoleOutputHandler(),
            config=self.settings.app,
            variant=variant,
            error_handler=ConsoleOutputHandler(err=True) if variant is Variant.VALIDATED else None,
        )

    def run_workflow(
        self, *, variant: Variant | None = None, worker: bool | None = None
    ) -> UserData | None:
        """Run one workflow, on a worker thread when requested."""
        app = self.build_application(variant)
        use_worker = self.settings.worker if worker is None else worker
        if use_worker:
            return run_on_worker(app)
        return app.run()
