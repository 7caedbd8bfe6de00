"""Locate a starter kit that has already been materialized on disk."""

from pathlib import Path

from starter_kit.errors import KitNotFoundError
from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.locator import split_package


def get_vendor_kit_path(project_dir: Path, package: str) -> Path:
    """Where composer puts a package inside the project."""
    return project_dir / "vendor" / package


def resolve_kit_root(
    file_store: FileStore,
    package: str,
    project_dir: Path,
    kit_path: Path | None,
) -> Path:
    """Find the directory holding the kit's files.

    An explicit kit_path wins. Otherwise the kit is expected where composer
    installed it, under vendor/{vendor}/{name}.

    Args:
        file_store: Filesystem access
        package: Kit package name (vendor/name)
        project_dir: Destination project root
        kit_path: Directory given on the command line, if any

    Returns:
        The kit root directory

    Raises:
        ValueError: If package is not in vendor/name form
        KitNotFoundError: If the resolved directory doesn't exist
    """
    if split_package(package) is None:
        raise ValueError(f"Invalid package name [{package}]: expected vendor/name")

    kit_root = kit_path if kit_path is not None else get_vendor_kit_path(project_dir, package)
    if not file_store.is_dir(kit_root):
        raise KitNotFoundError(package, kit_root)
    return kit_root


def is_vendored_kit(kit_root: Path, project_dir: Path, package: str) -> bool:
    """Whether the kit lives in the project's vendor/ as a composer dependency."""
    return kit_root == get_vendor_kit_path(project_dir, package)
