"""Builders for test projects and kits.

The default kit mirrors a small real-world starter kit: a config override,
some content, one file that is exported and one that is not.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from starter_kit.context import StarterKitContext
from starter_kit.integrations.file_store.real import RealFileStore
from starter_kit.integrations.http_probe.fake import FakeHttpProbe
from starter_kit.integrations.package_installer.fake import FakePackageInstaller
from starter_kit.settings import InstallerSettings

KIT_PACKAGE = "statamic/cool-runnings"

DEFAULT_KIT_CONFIG: dict[str, Any] = {
    "export_paths": [
        "config",
        "content",
        "copied.md",
    ],
}


def build_project(project_dir: Path) -> Path:
    """Create a minimal composer project."""
    project_dir.mkdir(parents=True, exist_ok=True)
    composer_json = {
        "name": "statamic/statamic",
        "type": "project",
        "require": {
            "php": "^7.3 || ^8.0",
            "statamic/cms": "3.1.*",
        },
        "require-dev": {
            "phpunit/phpunit": "^9.3",
        },
    }
    write_manifest(project_dir, composer_json)

    config_dir = project_dir / "config"
    config_dir.mkdir()
    (config_dir / "filesystems.php").write_text(
        "<?php\n\nreturn [\n    'disks' => ['local' => ['driver' => 'local']],\n];\n",
        encoding="utf-8",
    )
    (config_dir / "app.php").write_text(
        "<?php\n\nreturn ['name' => 'Statamic'];\n", encoding="utf-8"
    )
    return project_dir


def build_kit(kit_root: Path, config: dict[str, Any] | None = None) -> Path:
    """Create the cool-runnings kit at kit_root."""
    (kit_root / "config").mkdir(parents=True)
    (kit_root / "config" / "filesystems.php").write_text(
        "<?php\n\nreturn [\n    'disks' => ['bobsled_pics' => ['driver' => 'local']],\n];\n",
        encoding="utf-8",
    )

    pages = kit_root / "content" / "collections" / "pages"
    pages.mkdir(parents=True)
    (pages / "home.md").write_text("---\ntitle: Home\n---\n", encoding="utf-8")

    (kit_root / "copied.md").write_text("Copied", encoding="utf-8")
    (kit_root / "not-copied.md").write_text("Not copied", encoding="utf-8")

    set_kit_config(kit_root, config if config is not None else DEFAULT_KIT_CONFIG)
    return kit_root


def set_kit_config(kit_root: Path, config: dict[str, Any]) -> None:
    """Overwrite the kit's starter-kit.yaml."""
    (kit_root / "starter-kit.yaml").write_text(yaml.safe_dump(config, sort_keys=False), encoding="utf-8")


def vendor_kit_path(project_dir: Path) -> Path:
    return project_dir / "vendor" / KIT_PACKAGE


def read_manifest(project_dir: Path) -> dict[str, Any]:
    return json.loads((project_dir / "composer.json").read_text(encoding="utf-8"))


def write_manifest(project_dir: Path, data: dict[str, Any]) -> None:
    (project_dir / "composer.json").write_text(
        json.dumps(data, indent=4) + "\n", encoding="utf-8"
    )


def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Every file (with contents) and directory (as None) under root."""
    snapshot: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root).as_posix()
        snapshot[relative] = path.read_bytes() if path.is_file() else None
    return snapshot


def make_context(
    project_dir: Path,
    *,
    responses: dict[str, int] | None = None,
    failing_packages: set[str] | None = None,
    settings: InstallerSettings | None = None,
) -> tuple[StarterKitContext, FakePackageInstaller, FakeHttpProbe]:
    """Context over the real filesystem with fake HTTP and a fake composer."""
    file_store = RealFileStore()
    package_installer = FakePackageInstaller(
        file_store=file_store,
        project_dir=project_dir,
        failing_packages=failing_packages,
    )
    http_probe = FakeHttpProbe(responses=responses)
    ctx = StarterKitContext.for_test(
        file_store=file_store,
        http_probe=http_probe,
        package_installer=package_installer,
        settings=settings,
    )
    return ctx, package_installer, http_probe
