"""Console-backed handlers (stdin / stdout)."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from welcomer.handlers.base import InputHandler, OutputHandler


class ConsoleInputHandler(InputHandler):
    """Read answers line by line from a text stream.

    The stream defaults to ``sys.stdin`` looked up at read time, so
    Click's test runner can swap it in.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read(self, prompt: str) -> str:
        click.echo(prompt)
        stream = self._stream if self._stream is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError("Entrada encerrada")
        return line.rstrip("\r\n")


class ConsoleOutputHandler(OutputHandler):
    """Write messages to stdout (or stderr) via ``click.echo``."""

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def write(self, message: str) -> None:
        click.echo(message, err=self._err)
