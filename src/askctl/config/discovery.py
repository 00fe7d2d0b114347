"""Config file discovery and loading.

askctl reads an optional ``askctl.toml`` from the user's config directory.
Supports the ASKCTL_CONFIG env var and the --config CLI flag as overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "askctl.toml"
CONFIG_ENV_VAR = "ASKCTL_CONFIG"


def config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME/askctl`` (default ``~/.config/askctl``)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "askctl"


def find_config() -> Path | None:
    """Locate the user's askctl.toml.

    Returns the path to the config file, or None if not found.
    Checks ASKCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    candidate = config_dir() / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_config_data(path: Path | None = None) -> dict[str, Any]:
    """Read the raw TOML table from *path* (default: discovered file).

    Returns an empty dict if no file is found.

    Raises:
        tomllib.TOMLDecodeError: the file is not valid TOML.
    """
    if path is None:
        path = find_config()
    if path is None or not path.is_file():
        return {}
    return tomllib.loads(path.read_text(encoding="utf-8"))
