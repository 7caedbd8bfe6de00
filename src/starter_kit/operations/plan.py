"""Turn a kit's declared export paths into a validated copy plan."""

import logging
from pathlib import Path

from starter_kit.errors import MissingExportPathError
from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.models.config import KitConfig, is_relative_inside
from starter_kit.models.plan import CopyEntry, CopyPlan

logger = logging.getLogger(__name__)


def plan_exports(file_store: FileStore, kit_root: Path, config: KitConfig) -> CopyPlan:
    """Build the copy plan for a kit without touching the destination.

    Only paths listed in export_paths are planned; anything else in the kit
    is never copied. Every declared path is checked before the plan is
    returned, so a plan either covers every export or does not exist.

    Args:
        file_store: Filesystem access (read-only use)
        kit_root: Directory the kit was materialized into
        config: Loaded kit descriptor

    Returns:
        CopyPlan with one entry per export path, in declaration order

    Raises:
        MissingExportPathError: For the first export path that doesn't exist
            under kit_root (or points outside it)
    """
    entries: list[CopyEntry] = []

    for export_path in config.export_paths:
        if not is_relative_inside(export_path):
            raise MissingExportPathError(export_path, kit_root)

        source = kit_root / export_path
        if not file_store.exists(source):
            raise MissingExportPathError(export_path, kit_root)

        kind = "directory" if file_store.is_dir(source) else "file"
        entries.append(
            CopyEntry(
                source=source,
                destination=config.destination_for(export_path),
                kind=kind,
            )
        )

    logger.debug("Planned %d export paths from %s", len(entries), kit_root)
    return CopyPlan(kit_root=kit_root, entries=tuple(entries))
