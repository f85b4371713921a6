"""Domain exceptions.

Both subclass ``ValueError`` so callers that only care about "bad value"
can catch them together.
"""

from __future__ import annotations


class UserDataError(ValueError):
    """A UserData invariant was violated at construction time."""


class InputParseError(ValueError):
    """Raw input text could not be parsed into the requested type."""

    def __init__(self, raw: str, target: str = "int") -> None:
        super().__init__(f"Valor inválido: {raw!r} não é do tipo {target}")
        self.raw = raw
        self.target = target
