"""Starter kit descriptor (starter-kit.yaml) I/O."""

import logging
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from starter_kit.errors import KitDescriptorNotFoundError, KitDescriptorParseError
from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.models.config import KitConfig

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "starter-kit.yaml"


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            # Keys pulled in by `<<` merges may be overridden
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key [{key}]",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def get_descriptor_path(kit_root: Path) -> Path:
    """Get the starter-kit.yaml path for a kit."""
    return kit_root / DESCRIPTOR_FILENAME


def load_kit_config(file_store: FileStore, kit_root: Path) -> KitConfig:
    """Load and validate starter-kit.yaml from the kit root.

    Args:
        file_store: Filesystem access
        kit_root: Directory the kit was materialized into

    Returns:
        Validated KitConfig

    Raises:
        KitDescriptorNotFoundError: If starter-kit.yaml doesn't exist
        KitDescriptorParseError: If it is not valid YAML or has the wrong shape
    """
    descriptor_path = get_descriptor_path(kit_root)
    if not file_store.exists(descriptor_path):
        raise KitDescriptorNotFoundError(descriptor_path)
    if file_store.is_dir(descriptor_path):
        raise KitDescriptorParseError(descriptor_path, "expected a file, found a directory")

    try:
        content = file_store.read_text(descriptor_path)
    except (OSError, UnicodeDecodeError) as e:
        raise KitDescriptorParseError(descriptor_path, f"cannot be read: {e}") from e

    try:
        data = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise KitDescriptorParseError(descriptor_path, str(e)) from e

    # An empty file is a kit that exports and requires nothing
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise KitDescriptorParseError(descriptor_path, "expected a mapping at the top level")

    try:
        config = KitConfig.model_validate(data)
    except ValidationError as e:
        raise KitDescriptorParseError(descriptor_path, _summarize(e)) from e

    logger.debug(
        "Loaded %s: %d export paths, %d dependencies, %d dev dependencies",
        descriptor_path,
        len(config.export_paths),
        len(config.dependencies),
        len(config.dependencies_dev),
    )
    return config


def _summarize(error: ValidationError) -> str:
    """One line per validation problem, prefixed with its location."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        if location:
            messages.append(f"{location}: {detail['msg']}")
        else:
            messages.append(detail["msg"])
    return "; ".join(messages)
