"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, welcomer.toml only contains
overrides. The defaults reproduce the Portuguese bordered texts.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from welcomer.domain.user import UserRules

_BORDER = "*********************************"

DEFAULT_WELCOME_MESSAGE = (
    f"{_BORDER}\nOlá, informe o seu nome (mínimo {{min_name_length}} caracteres):\n{_BORDER}"
)
DEFAULT_AGE_PROMPT = f"{_BORDER}\nInforme sua idade ({{min_age}} a {{max_age}}):\n{_BORDER}"
DEFAULT_GREETING_FORMAT = f"{_BORDER}\nOlá {{name}}, sua idade é {{age}}\n{_BORDER}"
DEFAULT_INVALID_INPUT_MESSAGE = "Entrada inválida. Por favor, tente novamente."
DEFAULT_ERROR_FORMAT = "Erro: {message}"

# Placeholders each template must render with.
_TEMPLATE_SAMPLES: dict[str, dict[str, Any]] = {
    "welcome_message": {"min_name_length": 3},
    "age_prompt": {"min_age": 1, "max_age": 120},
    "greeting_format": {"name": "Maria", "age": 40},
    "error_format": {"message": "x"},
}


class AppConfig(BaseModel):
    """[app] section: limits and message templates, frozen after load."""

    model_config = {"frozen": True}

    min_name_length: int = Field(default=3, ge=1)
    min_age: int = 1
    max_age: int = 120
    welcome_message: str = DEFAULT_WELCOME_MESSAGE
    age_prompt: str = DEFAULT_AGE_PROMPT
    greeting_format: str = DEFAULT_GREETING_FORMAT
    invalid_input_message: str = DEFAULT_INVALID_INPUT_MESSAGE
    error_format: str = DEFAULT_ERROR_FORMAT

    @model_validator(mode="after")
    def _check_consistency(self) -> AppConfig:
        if self.min_age > self.max_age:
            msg = f"min_age ({self.min_age}) must not exceed max_age ({self.max_age})"
            raise ValueError(msg)
        for name, sample in _TEMPLATE_SAMPLES.items():
            template: str = getattr(self, name)
            try:
                template.format(**sample)
            except (KeyError, IndexError, ValueError) as exc:
                allowed = ", ".join(f"{{{key}}}" for key in sample) or "none"
                msg = f"{name} is not a valid template (allowed placeholders: {allowed}): {exc}"
                raise ValueError(msg) from exc
        return self

    @property
    def rules(self) -> UserRules:
        """The UserData invariant limits described by this config."""
        return UserRules(
            min_name_length=self.min_name_length,
            min_age=self.min_age,
            max_age=self.max_age,
        )

    def name_prompt(self) -> str:
        return self.welcome_message.format(min_name_length=self.min_name_length)

    def age_prompt_text(self) -> str:
        return self.age_prompt.format(min_age=self.min_age, max_age=self.max_age)

    def error_text(self, message: str) -> str:
        return self.error_format.format(message=message)
