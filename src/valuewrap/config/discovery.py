"""Config file discovery and loading.

Settings live either in a dedicated ``valuewrap.toml`` or in the
``[tool.valuewrap]`` table of a project's ``pyproject.toml``. Discovery walks
up from the starting directory and stops at the first directory holding
either; ``valuewrap.toml`` wins when a directory has both.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "valuewrap.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "VALUEWRAP_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "valuewrap" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config file.

    Returns the path to the config file, or None if not found.
    Checks VALUEWRAP_CONFIG env var first; a pyproject.toml only counts
    when it carries a ``[tool.valuewrap]`` table.
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
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Return the settings table stored in *path*.

    For ``pyproject.toml`` that is the ``[tool.valuewrap]`` table; any other
    file is read whole. Raises ``tomllib.TOMLDecodeError`` on invalid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("valuewrap", {}))
    return data
