"""Tests for AppConfig — defaults, validation, rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from welcomer.config.models import AppConfig
from welcomer.domain.user import UserRules


class TestAppConfigDefaults:
    def test_limits(self) -> None:
        cfg = AppConfig()
        assert (cfg.min_name_length, cfg.min_age, cfg.max_age) == (3, 1, 120)

    def test_rules(self) -> None:
        assert AppConfig().rules == UserRules(min_name_length=3, min_age=1, max_age=120)

    def test_name_prompt(self) -> None:
        assert AppConfig().name_prompt() == (
            "*********************************\n"
            "Olá, informe o seu nome (mínimo 3 caracteres):\n"
            "*********************************"
        )

    def test_age_prompt(self) -> None:
        assert AppConfig().age_prompt_text() == (
            "*********************************\n"
            "Informe sua idade (1 a 120):\n"
            "*********************************"
        )

    def test_greeting(self) -> None:
        greeting = AppConfig().greeting_format.format(name="Maria", age=40)
        assert "Olá Maria, sua idade é 40" in greeting
        assert greeting.startswith("*****")
        assert greeting.endswith("*****")

    def test_error_text(self) -> None:
        assert AppConfig().error_text("falhou") == "Erro: falhou"

    def test_frozen(self) -> None:
        cfg = AppConfig()
        with pytest.raises(ValidationError):
            cfg.min_age = 5  # type: ignore[misc]


class TestAppConfigValidation:
    def test_min_name_length_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(min_name_length=0)

    def test_age_range_ordered(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            AppConfig(min_age=50, max_age=10)

    def test_single_age_range_allowed(self) -> None:
        assert AppConfig(min_age=30, max_age=30).rules.age_error(30) is None

    def test_unknown_placeholder_rejected(self) -> None:
        with pytest.raises(ValidationError, match="greeting_format"):
            AppConfig(greeting_format="Hi {nome}")

    def test_unbalanced_brace_rejected(self) -> None:
        with pytest.raises(ValidationError, match="welcome_message"):
            AppConfig(welcome_message="Name {")

    def test_placeholders_optional(self) -> None:
        cfg = AppConfig(age_prompt="Age?")
        assert cfg.age_prompt_text() == "Age?"
