"""In-memory handlers for scripted runs and tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from welcomer.handlers.base import InputHandler, OutputHandler


class ScriptedInputHandler(InputHandler):
    """Answer prompts from a fixed sequence of lines.

    Every prompt received is recorded in :attr:`prompts`. Once the
    answers run out, :meth:`read` raises ``EOFError``, which bounds the
    otherwise unbounded retry loop.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: deque[str] = deque(answers)
        self.prompts: list[str] = []

    @property
    def remaining(self) -> int:
        """Number of answers not consumed yet."""
        return len(self._answers)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError("Entrada encerrada")
        return self._answers.popleft()


class RecordingOutputHandler(OutputHandler):
    """Collect written messages in :attr:`messages`."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)

    @property
    def text(self) -> str:
        """All messages joined by newlines."""
        return "\n".join(self.messages)
