"""Shared pytest fixtures and test helpers for welcomer tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator, Iterable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from welcomer.handlers.memory import RecordingOutputHandler, ScriptedInputHandler
from welcomer.services.application import WelcomeApplication


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no WELCOMER_* env vars.

    Keeps config discovery from picking up a welcomer.toml outside the
    test's control.
    """
    for key in list(os.environ):
        if key.startswith("WELCOMER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and ``welcomer`` logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("welcomer")
    app_handlers = app_logger.handlers[:]
    app_level = app_logger.level
    app_propagate = app_logger.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.handlers = app_handlers
    app_logger.setLevel(app_level)
    app_logger.propagate = app_propagate


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def scripted_app(
    answers: Iterable[str], **kwargs: Any
) -> tuple[WelcomeApplication, ScriptedInputHandler, RecordingOutputHandler]:
    """Build a WelcomeApplication fed by *answers*, recording its output."""
    inp = ScriptedInputHandler(answers)
    out = RecordingOutputHandler()
    return WelcomeApplication(inp, out, **kwargs), inp, out
