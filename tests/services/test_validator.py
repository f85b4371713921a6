"""Tests for UserDataValidator predicates."""

from __future__ import annotations

import string

import pytest

from welcomer.domain.user import UserData, UserRules
from welcomer.domain.validation import Failure, Success
from welcomer.services.validator import UserDataValidator


@pytest.fixture
def validator() -> UserDataValidator:
    return UserDataValidator()


class TestIsValidName:
    @pytest.mark.parametrize("length", range(0, 3))
    def test_short_names_rejected(self, validator: UserDataValidator, length: int) -> None:
        assert validator.is_valid_name("x" * length) is False

    @pytest.mark.parametrize("length", [3, 4, 10, 255])
    def test_long_enough_names_accepted(self, validator: UserDataValidator, length: int) -> None:
        assert validator.is_valid_name("x" * length) is True

    def test_whitespace_counts_as_characters(self, validator: UserDataValidator) -> None:
        assert validator.is_valid_name("   ") is True

    def test_none_rejected_without_raising(self, validator: UserDataValidator) -> None:
        assert validator.is_valid_name(None) is False

    def test_non_string_rejected(self, validator: UserDataValidator) -> None:
        assert validator.is_valid_name(12345) is False

    def test_custom_minimum(self) -> None:
        validator = UserDataValidator(UserRules(min_name_length=1))
        assert validator.is_valid_name("a") is True
        assert validator.is_valid_name("") is False


class TestIsValidAge:
    def test_matches_default_range(self, validator: UserDataValidator) -> None:
        for age in range(-50, 200):
            assert validator.is_valid_age(age) is (1 <= age <= 120)

    @pytest.mark.parametrize(("age", "expected"), [(0, False), (1, True), (120, True), (121, False)])
    def test_boundaries(self, validator: UserDataValidator, age: int, expected: bool) -> None:
        assert validator.is_valid_age(age) is expected

    def test_non_int_rejected(self, validator: UserDataValidator) -> None:
        assert validator.is_valid_age("30") is False
        assert validator.is_valid_age(30.0) is False
        assert validator.is_valid_age(None) is False


class TestValidateResults:
    def test_name_success(self, validator: UserDataValidator) -> None:
        assert validator.validate_name("Maria") == Success()

    def test_name_failure_message(self, validator: UserDataValidator) -> None:
        assert validator.validate_name("ab") == Failure("Nome deve ter pelo menos 3 caracteres")

    def test_age_failure_message(self, validator: UserDataValidator) -> None:
        assert validator.validate_age(200) == Failure("Idade deve ser entre 1 e 120")

    def test_age_success(self, validator: UserDataValidator) -> None:
        assert validator.validate_age(30).is_success


class TestAgreementWithConstructor:
    """Whatever the validator accepts, UserData must accept too."""

    def test_accepted_pairs_construct(self, validator: UserDataValidator) -> None:
        names = ["", "a", "ab", "abc", "Maria", *string.ascii_letters]
        for name in names:
            for age in (-1, 0, 1, 60, 120, 121):
                if validator.is_valid_name(name) and validator.is_valid_age(age):
                    UserData(name=name, age=age)
