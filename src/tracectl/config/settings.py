"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TRACECTL_*`` prefix
  3. TOML file: ``tracectl.toml`` from --config, TRACECTL_CONFIG,
     project walk-up or the user config directory
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tracectl.config.discovery import ConfigOrigin, locate_config
from tracectl.config.models import OutputConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the located ``tracectl.toml`` file."""

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
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TracectlSettings(BaseSettings):
    """Unified settings for the tracectl CLI.

    Stored on the :class:`~tracectl.commands._context.AppContext` built by
    the root group.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        config_origin: How *config_path* was found, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TRACECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_origin: ConfigOrigin | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
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
    ) -> TracectlSettings:
        """Construct settings from a CLI invocation.

        The TOML file comes from :func:`~tracectl.config.discovery.locate_config`;
        *config_path* is the ``--config`` value and *start* the directory
        the project walk-up begins from.
        """
        location = locate_config(start, explicit=config_path)
        toml_path = location.path if location else None

        _tls.toml_path = toml_path
        try:
            return cls(
                config_path=toml_path,
                config_origin=location.origin if location else None,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
