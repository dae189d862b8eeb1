"""Config file discovery.

Walk-up finder locates circlebox.toml, similar to how git finds .git/.
Supports CIRCLEBOX_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "circlebox.toml"
CONFIG_ENV_VAR = "CIRCLEBOX_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest circlebox.toml at or above *start* (default: cwd).

    A set CIRCLEBOX_CONFIG wins outright: it names the file, and a missing
    file means no config rather than falling back to the walk-up.
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
