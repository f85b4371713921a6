"""Run a workflow on one dedicated worker thread.

The calling thread blocks until the workflow finishes; there is no
timeout and no cancellation. End of input is what aborts a stuck run.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from welcomer.domain.user import UserData
    from welcomer.services.application import WelcomeApplication

logger = logging.getLogger(__name__)


def run_on_worker(app: WelcomeApplication) -> UserData | None:
    """Submit ``app.run`` to a single-thread executor and wait for it."""
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="welcomer-worker") as executor:
        logger.debug("Dispatching workflow to worker thread")
        future = executor.submit(app.run)
        return future.result()
