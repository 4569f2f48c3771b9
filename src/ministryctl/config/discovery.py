"""Config file discovery and reading.

Walk-up finder locates ministry.toml, similar to how git finds .git/.
Supports MINISTRYCTL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "ministry.toml"
CONFIG_ENV_VAR = "MINISTRYCTL_CONFIG"


class ConfigError(Exception):
    """Raised when a config file exists but cannot be parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ministry.toml.

    MINISTRYCTL_CONFIG wins when set; a dangling value means "no config"
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path | None) -> dict[str, Any]:
    """Parse *path* as TOML; an absent path yields an empty mapping."""
    if path is None or not path.is_file():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded config from %s", path)
    return data
