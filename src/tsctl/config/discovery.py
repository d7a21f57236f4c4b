"""Locate and read tsctl.toml.

Resolution order: an explicit ``--config`` path, then the TSCTL_CONFIG env
var, then a walk up from the working directory (the way git finds .git/).
Every problem with the file itself surfaces as a ``click.ClickException``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "tsctl.toml"
CONFIG_ENV_VAR = "TSCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the tsctl.toml that applies to *start* (default: cwd), or None.

    TSCTL_CONFIG wins when set; a value naming a missing file means
    "no config" rather than falling back to the walk-up.
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


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for a CLI run.

    An explicit *config_path* must exist; otherwise discovery applies.
    """
    if not config_path:
        return find_config(start)
    path = Path(config_path)
    if not path.is_file():
        raise click.ClickException(f"Config file not found: {path}")
    return path


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; an absent file reads as empty."""
    if path is None:
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
