"""Tests for PackageInstaller implementations."""

import json
from pathlib import Path

import pytest

from starter_kit.errors import PackageInstallError
from starter_kit.integrations.file_store.real import RealFileStore
from starter_kit.integrations.package_installer.fake import FakePackageInstaller, RequireCall
from starter_kit.integrations.package_installer.real import ComposerPackageInstaller


def _fake_composer(tmp_path: Path, exit_code: int = 0) -> tuple[Path, Path]:
    """Write an executable that logs its arguments instead of running composer."""
    log_path = tmp_path / "composer.log"
    script = tmp_path / "composer"
    script.write_text(
        "#!/bin/sh\n"
        f'echo "$@" >> "{log_path}"\n'
        'echo "Your requirements could not be resolved" >&2\n'
        f"exit {exit_code}\n",
        encoding="utf-8",
    )
    script.chmod(0o755)
    return script, log_path


def test_composer_require(tmp_path: Path) -> None:
    """Test the composer require command line."""
    script, log_path = _fake_composer(tmp_path)
    installer = ComposerPackageInstaller(tmp_path, composer_binary=str(script))

    installer.require("statamic/seo-pro", "^2.0", dev=False)
    installer.require("statamic/ssg", "*", dev=True)

    assert log_path.read_text(encoding="utf-8").splitlines() == [
        "require statamic/seo-pro:^2.0 --no-interaction",
        "require statamic/ssg:* --no-interaction --dev",
    ]


def test_composer_remove(tmp_path: Path) -> None:
    """Test the composer remove command line."""
    script, log_path = _fake_composer(tmp_path)

    ComposerPackageInstaller(tmp_path, composer_binary=str(script)).remove(
        "statamic/cool-runnings"
    )

    assert log_path.read_text(encoding="utf-8").splitlines() == [
        "remove statamic/cool-runnings --no-interaction"
    ]


def test_composer_failure_raises(tmp_path: Path) -> None:
    """Test that a non-zero exit becomes PackageInstallError with composer's output."""
    script, _ = _fake_composer(tmp_path, exit_code=2)
    installer = ComposerPackageInstaller(tmp_path, composer_binary=str(script))

    with pytest.raises(PackageInstallError) as exc_info:
        installer.require("bobsled/missing", "^1.0", dev=False)

    assert exc_info.value.package == "bobsled/missing"
    assert "could not be resolved" in exc_info.value.message


def test_composer_missing_binary(tmp_path: Path) -> None:
    """Test that a missing composer executable is a PackageInstallError."""
    installer = ComposerPackageInstaller(
        tmp_path, composer_binary=str(tmp_path / "no-such-composer")
    )

    with pytest.raises(PackageInstallError, match="Command not found"):
        installer.require("statamic/ssg", "*", dev=True)


def test_fake_installer_updates_manifest_and_vendor(tmp_path: Path) -> None:
    """Test that the fake mimics composer's effect on the project."""
    (tmp_path / "composer.json").write_text('{"require": {}}', encoding="utf-8")
    installer = FakePackageInstaller(file_store=RealFileStore(), project_dir=tmp_path)

    installer.require("statamic/seo-pro", "^2.0", dev=False)
    installer.require("statamic/ssg", "*", dev=True)

    manifest = json.loads((tmp_path / "composer.json").read_text(encoding="utf-8"))
    assert manifest["require"] == {"statamic/seo-pro": "^2.0"}
    assert manifest["require-dev"] == {"statamic/ssg": "*"}
    assert (tmp_path / "vendor" / "statamic" / "ssg").is_dir()
    assert installer.required == [
        RequireCall(package="statamic/seo-pro", constraint="^2.0", dev=False),
        RequireCall(package="statamic/ssg", constraint="*", dev=True),
    ]

    installer.remove("statamic/ssg")

    manifest = json.loads((tmp_path / "composer.json").read_text(encoding="utf-8"))
    assert "statamic/ssg" not in manifest["require-dev"]
    assert not (tmp_path / "vendor" / "statamic" / "ssg").exists()
    assert installer.removed == ["statamic/ssg"]


def test_fake_installer_failing_package() -> None:
    """Test that configured packages fail and are not recorded."""
    installer = FakePackageInstaller(failing_packages={"bobsled/missing"})

    with pytest.raises(PackageInstallError):
        installer.require("bobsled/missing", "^1.0", dev=False)

    assert installer.required == []
