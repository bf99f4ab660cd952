"""Config file discovery.

Walk-up finder locates pagarme.toml, similar to how git finds .git/.
The PAGARME_CONFIG env var takes precedence over the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pagarme.toml"
CONFIG_ENV_VAR = "PAGARME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the pagarme.toml governing *start* (default: cwd), or None.

    A set PAGARME_CONFIG wins even when it names a missing file, in which
    case no config applies.
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
