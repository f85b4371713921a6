"""Abstract input/output handlers.

The workflow never touches stdin/stdout directly; it talks to an
InputHandler and an OutputHandler so tests can script every answer.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from welcomer.domain.errors import InputParseError

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> int:
    """Parse *raw* as a base-10 integer.

    Accepts an optional sign and ASCII digits, ignoring surrounding
    whitespace. Anything else raises :class:`InputParseError`.

    Examples:
        >>> parse_int(" 42 ")
        42
        >>> parse_int("-5")
        -5
    """
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise InputParseError(raw)
    return int(text)


class InputHandler(ABC):
    """Source of raw text lines, one per prompt."""

    @abstractmethod
    def read(self, prompt: str) -> str:
        """Display *prompt* and return one line of input (no newline).

        Raises:
            EOFError: when no more input is available.
        """

    def read_int(self, prompt: str) -> int:
        """Read a line and parse it as an integer.

        Raises:
            InputParseError: if the line is not an integer.
        """
        return parse_int(self.read(prompt))


class OutputHandler(ABC):
    """Sink for user-facing messages."""

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit *message* as one block of output."""

    def write_formatted(self, template: str, *args: Any, **kwargs: Any) -> None:
        """Render *template* with ``str.format`` and emit it."""
        self.write(template.format(*args, **kwargs))
