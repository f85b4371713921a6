"""ValidationResult: outcome of a single validation attempt."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Success:
    """The candidate value was accepted."""

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The candidate value was rejected, with a user-facing reason."""

    message: str

    @property
    def is_success(self) -> bool:
        return False


type ValidationResult = Success | Failure
