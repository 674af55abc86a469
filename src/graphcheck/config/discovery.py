"""Config file discovery.

Walk-up finder locates graphcheck.toml, the way git finds .git/.
The GRAPHCHECK_CONFIG env var and the --config flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "graphcheck.toml"
CONFIG_ENV_VAR = "GRAPHCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for graphcheck.toml.

    Returns the path to the config file, or None if not found.
    Checks GRAPHCHECK_CONFIG first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent

