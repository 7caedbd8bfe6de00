"""Tests for context creation and CLI plumbing."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from starter_kit.context import StarterKitContext, create_context
from starter_kit.context_helpers import get_or_create_context
from starter_kit.error_boundary import cli_error_boundary
from starter_kit.errors import KitNotFoundError
from starter_kit.integrations.file_store.fake import FakeFileStore
from starter_kit.integrations.file_store.real import RealFileStore
from starter_kit.integrations.http_probe.fake import FakeHttpProbe
from starter_kit.integrations.http_probe.real import RealHttpProbe
from starter_kit.integrations.package_installer.fake import FakePackageInstaller
from starter_kit.integrations.package_installer.real import ComposerPackageInstaller
from starter_kit.logging_setup import is_debug_requested
from starter_kit.settings import InstallerSettings


def test_for_test_uses_fakes() -> None:
    """Test that for_test fills in fakes for everything not given."""
    ctx = StarterKitContext.for_test()

    assert isinstance(ctx.file_store, FakeFileStore)
    assert isinstance(ctx.http_probe, FakeHttpProbe)
    assert isinstance(ctx.package_installer, FakePackageInstaller)
    assert ctx.settings == InstallerSettings()
    assert not ctx.debug


def test_create_context_uses_real_integrations(tmp_path: Path) -> None:
    """Test that the production context wires real implementations."""
    ctx = create_context(tmp_path, InstallerSettings(), debug=True)

    assert isinstance(ctx.file_store, RealFileStore)
    assert isinstance(ctx.http_probe, RealHttpProbe)
    assert isinstance(ctx.package_installer, ComposerPackageInstaller)
    assert ctx.debug


def test_is_debug_requested(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the --debug flag and STARTER_KIT_DEBUG."""
    monkeypatch.delenv("STARTER_KIT_DEBUG", raising=False)
    assert not is_debug_requested(False)
    assert is_debug_requested(True)

    monkeypatch.setenv("STARTER_KIT_DEBUG", "1")
    assert is_debug_requested(False)


def test_error_boundary_known_error() -> None:
    """Test that known errors become a clean message and exit 1."""

    @click.command()
    @cli_error_boundary
    def failing() -> None:
        raise KitNotFoundError(
            "statamic/cool-runnings", Path("/site/vendor/statamic/cool-runnings")
        )

    result = CliRunner().invoke(failing, [])

    assert result.exit_code == 1
    assert "Error: Starter kit [statamic/cool-runnings] not found" in result.output


def test_error_boundary_unknown_error_propagates() -> None:
    """Test that unexpected exceptions are not swallowed."""

    @click.command()
    @cli_error_boundary
    def failing() -> None:
        raise RuntimeError("boom")

    result = CliRunner().invoke(failing, [])

    assert isinstance(result.exception, RuntimeError)


def test_error_boundary_debug_context_shows_traceback() -> None:
    """Test that a debug context lets known errors through with their traceback."""

    @click.command()
    @cli_error_boundary
    def failing() -> None:
        raise KitNotFoundError(
            "statamic/cool-runnings", Path("/site/vendor/statamic/cool-runnings")
        )

    result = CliRunner().invoke(failing, [], obj=StarterKitContext.for_test(debug=True))

    assert isinstance(result.exception, KitNotFoundError)
    assert "Error: Starter kit" not in result.output


def test_get_or_create_context_stores_created_context(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that the created context is kept on the click context for later lookups."""
    monkeypatch.setenv("STARTER_KIT_CONFIG", str(tmp_path / "config.toml"))
    click_ctx = click.Context(click.Command("install"))

    with click_ctx:
        ctx = get_or_create_context(click_ctx, tmp_path)

    assert click_ctx.obj is ctx
    assert get_or_create_context(click_ctx, tmp_path) is ctx
