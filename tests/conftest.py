# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def strict_project(tmp_path: Path) -> Path:
    """Create a project whose pyproject.toml disables the v prefix."""
    project_dir = tmp_path / "strict_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "strict-project"
version = "1.0.0"

[tool.strict-semver]
allow-v-prefix = false
"""
    )
    return project_dir
