"""Apply a copy plan to the destination project."""

import logging
from collections.abc import Sequence
from pathlib import Path

from starter_kit.errors import KitCopyError
from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.models.plan import CopyEntry, CopyPlan

logger = logging.getLogger(__name__)


def clear_destination(file_store: FileStore, destination: Path, clear_paths: Sequence[str]) -> None:
    """Delete the destination's content area before a kit is copied in.

    Args:
        file_store: Filesystem access
        destination: Project root
        clear_paths: Content paths relative to the project root. Control
            files such as composer.json are never listed here.

    Raises:
        KitCopyError: If a path cannot be deleted
    """
    for relative in clear_paths:
        target = destination / relative
        if not file_store.exists(target):
            continue
        logger.debug("Clearing %s", target)
        try:
            file_store.delete(target)
        except OSError as e:
            raise KitCopyError(relative, e) from e


def apply_plan(
    file_store: FileStore,
    plan: CopyPlan,
    destination: Path,
    *,
    clear_first: bool,
    clear_paths: Sequence[str],
) -> list[str]:
    """Copy every planned entry into the destination project.

    Directory entries are merged: files already in the destination that the
    kit doesn't provide are left alone. File entries overwrite whatever is at
    the destination path.

    Args:
        file_store: Filesystem access
        plan: Validated copy plan
        destination: Project root
        clear_first: Delete clear_paths before copying anything
        clear_paths: Content paths removed when clear_first is set

    Returns:
        Destination paths of every copied file, relative to the project root

    Raises:
        KitCopyError: If a file cannot be copied. Files copied before the
            failure stay in place.
    """
    if clear_first:
        clear_destination(file_store, destination, clear_paths)

    copied: list[str] = []
    for entry in plan.entries:
        if entry.kind == "directory":
            copied.extend(_merge_directory(file_store, entry, destination))
        else:
            _copy(file_store, entry.source, destination / entry.destination, entry.destination)
            copied.append(entry.destination)

    logger.debug("Copied %d files into %s", len(copied), destination)
    return copied


def _merge_directory(file_store: FileStore, entry: CopyEntry, destination: Path) -> list[str]:
    target_dir = destination / entry.destination
    try:
        file_store.make_dirs(target_dir)
    except OSError as e:
        raise KitCopyError(entry.destination, e) from e

    copied: list[str] = []
    for relative in file_store.walk_files(entry.source):
        relative_destination = (Path(entry.destination) / relative).as_posix()
        _copy(file_store, entry.source / relative, target_dir / relative, relative_destination)
        copied.append(relative_destination)
    return copied


def _copy(file_store: FileStore, source: Path, target: Path, label: str) -> None:
    try:
        file_store.copy_file(source, target)
    except OSError as e:
        raise KitCopyError(label, e) from e
