"""Input and output capabilities consumed by the welcome workflow."""

from welcomer.handlers.base import InputHandler, OutputHandler
from welcomer.handlers.console import ConsoleInputHandler, ConsoleOutputHandler
from welcomer.handlers.memory import RecordingOutputHandler, ScriptedInputHandler

__all__ = [
    "ConsoleInputHandler",
    "ConsoleOutputHandler",
    "InputHandler",
    "OutputHandler",
    "RecordingOutputHandler",
    "ScriptedInputHandler",
]
