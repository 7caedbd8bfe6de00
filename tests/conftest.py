"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.helpers import build_kit, build_project, vendor_kit_path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A composer project with some existing config."""
    return build_project(tmp_path / "site")


@pytest.fixture
def kit_root(project_dir: Path) -> Path:
    """The cool-runnings kit, already downloaded into the project's vendor/."""
    return build_kit(vendor_kit_path(project_dir))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()
