"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TSCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``tsctl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tsctl.config.discovery import read_config, resolve_config
from tsctl.config.models import ArithConfig, OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the parsed ``tsctl.toml`` tables to Pydantic."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the parsed TOML during construction.
_tls = threading.local()


class TsSettings(BaseSettings):
    """Settings for the tsctl CLI, frozen once built.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TSCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    arith: ArithConfig = Field(default_factory=ArithConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

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
        data = getattr(_tls, "toml_data", None) or {}
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, data),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        strict: bool = False,
        **cli_flags: Any,
    ) -> TsSettings:
        """Construct settings from CLI invocation.

        Discovers ``tsctl.toml`` by walking up from *start* (or uses the
        explicit *config_path*, which must exist) and merges CLI flags as
        highest-priority overrides. ``strict=True`` overrides
        ``[arith] strict``; False leaves the configured value alone.

        Raises:
            click.ClickException: The config file is missing, unparsable,
                or holds values that fail validation.
        """
        toml_path = resolve_config(config_path, start)

        _tls.toml_data = read_config(toml_path)
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.ClickException(f"Invalid config in {source}: {exc}") from exc
        finally:
            _tls.toml_data = None

        if strict and not settings.arith.strict:
            arith = settings.arith.model_copy(update={"strict": True})
            settings = settings.model_copy(update={"arith": arith})
        return settings
