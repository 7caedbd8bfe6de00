"""composer.json I/O.

The manifest is treated as an ordered JSON object. Only the `repositories`
key is ever changed here; `require` and `require-dev` belong to composer.
"""

import json
from pathlib import Path
from typing import Any

from starter_kit.integrations.file_store.abc import FileStore

MANIFEST_FILENAME = "composer.json"


def get_manifest_path(project_dir: Path) -> Path:
    """Get the composer.json path for a project."""
    return project_dir / MANIFEST_FILENAME


def load_manifest(file_store: FileStore, project_dir: Path) -> dict[str, Any]:
    """Load composer.json from the project directory.

    Returns:
        Parsed manifest, or an empty dict if the file doesn't exist

    Raises:
        ValueError: If the file is not a JSON object
    """
    manifest_path = get_manifest_path(project_dir)
    if not file_store.exists(manifest_path):
        return {}

    try:
        data = json.loads(file_store.read_text(manifest_path))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {manifest_path}")
    return data


def render_manifest(data: dict[str, Any]) -> str:
    """Serialize a manifest the way composer writes it.

    Four-space indentation, slashes and unicode left unescaped, key order kept.
    """
    return json.dumps(data, indent=4, ensure_ascii=False) + "\n"


def save_manifest(file_store: FileStore, project_dir: Path, data: dict[str, Any]) -> None:
    """Write composer.json to the project directory."""
    file_store.write_text(get_manifest_path(project_dir), render_manifest(data))


def get_repositories(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the manifest's repositories list (empty if absent).

    Raises:
        ValueError: If `repositories` is present but not a list (including
            composer's object form keyed by name)
    """
    if "repositories" not in data:
        return []
    repositories = data["repositories"]
    if isinstance(repositories, dict):
        raise ValueError(
            "composer.json `repositories` must be a list; "
            "the object form keyed by repository name is not supported"
        )
    if not isinstance(repositories, list):
        raise ValueError("composer.json `repositories` must be a list")
    return repositories


def with_repositories(data: dict[str, Any], repositories: list[dict[str, Any]]) -> dict[str, Any]:
    """Return a copy of the manifest with its repositories replaced.

    An empty list removes the key instead of writing `"repositories": []`.
    """
    updated = dict(data)
    if repositories:
        updated["repositories"] = repositories
    elif "repositories" in updated:
        del updated["repositories"]
    return updated
