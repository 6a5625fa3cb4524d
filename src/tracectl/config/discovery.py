"""Locating tracectl.toml.

Lookup order, first hit wins:

1. ``--config PATH`` on the command line;
2. the ``TRACECTL_CONFIG`` environment variable;
3. a project file, found by walking up from the working directory;
4. the user file, ``$XDG_CONFIG_HOME/tracectl/tracectl.toml``.

An explicit path (1 or 2) that does not exist disables the later steps
rather than silently picking up some other file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

CONFIG_FILENAME = "tracectl.toml"
CONFIG_ENV_VAR = "TRACECTL_CONFIG"


class ConfigOrigin(StrEnum):
    """Where a config file was found."""

    FLAG = "flag"
    ENV = "env"
    PROJECT = "project"
    USER = "user"


@dataclass(frozen=True)
class ConfigLocation:
    path: Path
    origin: ConfigOrigin


def user_config_path() -> Path:
    """Per-user config file, honouring ``XDG_CONFIG_HOME``."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "tracectl" / CONFIG_FILENAME


def _walk_up(start: Path) -> Path | None:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(
    start: Path | None = None,
    *,
    explicit: str | Path | None = None,
) -> ConfigLocation | None:
    """Find the config file for an invocation started in *start* (default: cwd)."""
    if explicit:
        p = Path(explicit)
        return ConfigLocation(p, ConfigOrigin.FLAG) if p.is_file() else None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return ConfigLocation(p, ConfigOrigin.ENV) if p.is_file() else None

    project = _walk_up(start or Path.cwd())
    if project is not None:
        return ConfigLocation(project, ConfigOrigin.PROJECT)

    user = user_config_path()
    if user.is_file():
        return ConfigLocation(user, ConfigOrigin.USER)
    return None
