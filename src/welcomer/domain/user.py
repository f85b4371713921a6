"""UserData record and the rules that constrain it.

INVARIANT: a UserData instance always satisfies its UserRules. The
constructor is the authoritative check; the interactive validator reuses
the same rules so it can never be laxer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from welcomer.domain.errors import UserDataError


@dataclass(frozen=True, slots=True)
class UserRules:
    """Name length and age range limits, plus their failure messages."""

    min_name_length: int = 3
    min_age: int = 1
    max_age: int = 120

    @property
    def name_message(self) -> str:
        return f"Nome deve ter pelo menos {self.min_name_length} caracteres"

    @property
    def age_message(self) -> str:
        return f"Idade deve ser entre {self.min_age} e {self.max_age}"

    def name_error(self, name: object) -> str | None:
        """Return why *name* is unacceptable, or None when it is fine."""
        if not isinstance(name, str) or not name:
            return "Nome não pode ser vazio"
        if len(name) < self.min_name_length:
            return self.name_message
        return None

    def age_error(self, age: object) -> str | None:
        """Return why *age* is unacceptable, or None when it is fine."""
        # bool is an int subclass; True is not an age.
        if not isinstance(age, int) or isinstance(age, bool):
            return self.age_message
        if not self.min_age <= age <= self.max_age:
            return self.age_message
        return None


DEFAULT_RULES = UserRules()


@dataclass(frozen=True, slots=True)
class UserData:
    """Validated name and age collected during one workflow run.

    Raises:
        UserDataError: if *name* or *age* break *rules*.
    """

    name: str
    age: int
    rules: UserRules = field(default=DEFAULT_RULES, repr=False, compare=False)

    def __post_init__(self) -> None:
        for error in (self.rules.name_error(self.name), self.rules.age_error(self.age)):
            if error is not None:
                raise UserDataError(error)
