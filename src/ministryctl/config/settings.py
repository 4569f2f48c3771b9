"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MINISTRYCTL_*`` prefix
  3. TOML file    — ``ministry.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`ministryctl.config.discovery`.
"""

from __future__ import annotations

import threading
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ministryctl.config.discovery import ConfigError, find_config, read_config_file
from ministryctl.config.models import (
    BirthdaysConfig,
    MeetingConfig,
    RosterConfig,
    TiersConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``ministry.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        try:
            self._data: dict[str, Any] = read_config_file(toml_path)
        except ConfigError as exc:
            import click

            raise click.ClickException(str(exc)) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MinistrySettings(BaseSettings):
    """Unified settings for the ministryctl CLI.

    Frozen after construction and stored on the Click context.

    Attributes:
        root: Directory holding ``ministry.toml`` (or CWD if none found).
            Relative roster paths resolve against it.
        config_path: The config file actually used, or None.
        today: Reference date override; None means "ask the host clock".
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MINISTRYCTL_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved path (not in TOML, derived from config location) ---
    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    today: date | None = None

    # --- TOML sections ---
    roster: RosterConfig = Field(default_factory=RosterConfig)
    birthdays: BirthdaysConfig = Field(default_factory=BirthdaysConfig)
    tiers: TiersConfig = Field(default_factory=TiersConfig)
    meeting: MeetingConfig = Field(default_factory=MeetingConfig)

    @property
    def roster_path(self) -> Path:
        """Roster file location, relative paths anchored at :attr:`root`."""
        path = Path(self.roster.path).expanduser()
        return path if path.is_absolute() else self.root / path

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
        root: Path | None = None,
        **cli_flags: Any,
    ) -> MinistrySettings:
        """Construct settings from CLI invocation.

        Discovers ``ministry.toml`` via walk-up (or explicit *config_path*),
        resolves *root* from the config file's parent directory, and merges
        CLI flags as highest-priority overrides.  Flags passed as None are
        dropped so they do not mask env vars or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        flags = {k: v for k, v in cli_flags.items() if v is not None}
        _tls.toml_path = toml_path
        try:
            return cls(
                root=resolved_root,
                config_path=toml_path,
                **flags,
            )
        finally:
            _tls.toml_path = None
