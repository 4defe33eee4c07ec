# SPDX-License-Identifier: MIT
"""Parser configuration loading from pyproject.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError

TOOL_TABLE = "strict-semver"


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how version strings are parsed.

    Attributes:
        allow_v_prefix: Strip a single leading "v" or "V" before matching
        strip_whitespace: Strip surrounding whitespace before matching
    """

    allow_v_prefix: bool = True
    strip_whitespace: bool = False

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> ParserConfig:
        """Create configuration from a parsed pyproject.toml dictionary.

        Options are read from the ``[tool.strict-semver]`` table. A missing
        table gives the defaults.

        Raises:
            ConfigError: If [tool] or the table is not a table, or the table
                contains unknown keys or non-boolean values
        """
        tool = pyproject.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError("[tool] must be a table")

        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table")

        known = {f.name.replace("_", "-"): f.name for f in fields(cls)}
        options: dict[str, bool] = {}
        for key, value in table.items():
            if key not in known:
                raise ConfigError(f"Unknown option in [tool.{TOOL_TABLE}]: {key}")
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Option '{key}' in [tool.{TOOL_TABLE}] must be a boolean, "
                    f"got {type(value).__name__}"
                )
            options[known[key]] = value

        return cls(**options)


DEFAULT_CONFIG = ParserConfig()


def find_project_root(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory containing pyproject.toml."""
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate

    return None


def load_config(project_dir: Optional[Path] = None) -> ParserConfig:
    """Load parser configuration from the project's pyproject.toml.

    Args:
        project_dir: Directory to search from. Defaults to the current directory.

    Returns:
        ParserConfig from ``[tool.strict-semver]``, or the defaults when no
        pyproject.toml is found

    Raises:
        ConfigError: If pyproject.toml cannot be parsed or is invalid
    """
    root = find_project_root(project_dir)
    if root is None:
        return DEFAULT_CONFIG

    pyproject_path = root / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid pyproject.toml: {e}") from e

    return ParserConfig.from_pyproject_dict(pyproject)
