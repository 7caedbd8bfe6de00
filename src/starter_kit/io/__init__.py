"""I/O operations for starter-kit."""

from starter_kit.io.descriptor import (
    DESCRIPTOR_FILENAME,
    get_descriptor_path,
    load_kit_config,
)
from starter_kit.io.manifest import (
    MANIFEST_FILENAME,
    get_manifest_path,
    get_repositories,
    load_manifest,
    render_manifest,
    save_manifest,
    with_repositories,
)

__all__ = [
    "DESCRIPTOR_FILENAME",
    "MANIFEST_FILENAME",
    "get_descriptor_path",
    "get_manifest_path",
    "get_repositories",
    "load_kit_config",
    "load_manifest",
    "render_manifest",
    "save_manifest",
    "with_repositories",
]
