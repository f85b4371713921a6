"""Unified settings from CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click (``None`` means "not given")
  2. Env vars: ``WELCOMER_*`` prefix, ``__`` for nesting
  3. TOML file: ``welcomer.toml`` discovered via walk-up
  4. Code defaults: baked into :class:`AppConfig`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any, Literal

import click
from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from welcomer.config.discovery import find_config
from welcomer.config.models import AppConfig
from welcomer.domain.types import Variant


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``welcomer.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class WelcomerSettings(BaseSettings):
    """Process-wide settings, frozen after construction.

    Attributes:
        config_path: The TOML file that was loaded, if any. Set only by
            :meth:`from_cli`; no env var or TOML key can change it.
        log_level: Explicit level for the ``welcomer`` logger.
        variant: Which workflow flavour ``run`` uses by default.
        worker: Run the workflow on a dedicated worker thread.
        app: Limits and message templates.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WELCOMER_",
        "env_nested_delimiter": "__",
    }

    _config_path: Path | None = PrivateAttr(default=None)

    # --- Logging ---
    verbose: bool = False
    log_json: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    # --- Workflow ---
    variant: Variant = Variant.ADVANCED
    worker: bool = False
    app: AppConfig = Field(default_factory=AppConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> WelcomerSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``welcomer.toml`` by walking up from *start*. Flags left as
        ``None`` do not override lower-priority sources.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start)

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            settings = cls(**overrides)
        finally:
            _tls.toml_path = None
        settings._config_path = toml_path
        return settings
