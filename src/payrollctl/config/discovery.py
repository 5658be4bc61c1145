"""Config file resolution.

payrollctl never goes looking for a config file on its own: a TOML file
is read only when named by the ``--config`` flag or the
``PAYROLLCTL_CONFIG`` env var.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_ENV_VAR = "PAYROLLCTL_CONFIG"


def find_config(config_path: str | Path | None = None) -> Path | None:
    """Return the config file to load, or None.

    An explicit *config_path* wins over ``PAYROLLCTL_CONFIG``. Paths that
    do not point at an existing file are ignored.
    """
    raw = config_path if config_path is not None else os.environ.get(CONFIG_ENV_VAR)
    if not raw:
        return None
    p = Path(raw)
    return p if p.is_file() else None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    return tomllib.loads(path.read_text(encoding="utf-8"))
