"""UserDataValidator: pure predicates over candidate names and ages.

INVARIANT: decisions come from the same UserRules the UserData
constructor enforces, so an accepted pair always constructs.
"""

from __future__ import annotations

from welcomer.domain.user import DEFAULT_RULES, UserRules
from welcomer.domain.validation import Failure, Success, ValidationResult


class UserDataValidator:
    """Accept or reject candidate field values. Never raises."""

    def __init__(self, rules: UserRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def is_valid_name(self, name: object) -> bool:
        return self.rules.name_error(name) is None

    def is_valid_age(self, age: object) -> bool:
        return self.rules.age_error(age) is None

    def validate_name(self, name: object) -> ValidationResult:
        error = self.rules.name_error(name)
        return Success() if error is None else Failure(error)

    def validate_age(self, age: object) -> ValidationResult:
        error = self.rules.age_error(age)
        return Success() if error is None else Failure(error)
