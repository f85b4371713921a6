"""structlog configuration for welcomer.

Logs share the terminal with interactive prompts, so:
- everything goes to stderr, never stdout
- only the ``welcomer`` logger tree is configured; the root logger and
  third-party loggers are left as the host process set them
- human mode drops timestamps (a prompt session is short); JSON mode
  (``--log-json``) keeps them for machine consumers

Level policy, first match wins: explicit *level* (``WELCOMER_LOG_LEVEL``
or ``log_level`` in welcomer.toml), then ``--verbose`` (DEBUG), then
WARNING.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "welcomer"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_level(*, verbose: bool = False, level: str | None = None) -> int:
    """Return the numeric level for the ``welcomer`` logger."""
    if level is not None:
        name = level.upper()
        if name not in LOG_LEVELS:
            msg = f"Unknown log level {level!r} (expected one of {', '.join(LOG_LEVELS)})"
            raise ValueError(msg)
        return logging.getLevelNamesMapping()[name]
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    level: str | None = None,
) -> None:
    """Configure structlog and attach one stderr handler to ``welcomer``.

    Safe to call repeatedly: the handler is replaced, not stacked.

    Args:
        verbose: DEBUG output unless *level* says otherwise.
        log_json: JSON lines instead of the console renderer.
        level: Explicit level name, overriding *verbose*.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    if log_json:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.handlers.clear()
    app_logger.addHandler(handler)
    app_logger.setLevel(resolve_level(verbose=verbose, level=level))
    app_logger.propagate = False
