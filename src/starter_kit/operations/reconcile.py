"""Merge discovered repositories into a manifest's repositories list."""

from collections.abc import Sequence
from typing import Any

from starter_kit.models.repository import RepositoryDescriptor


def reconcile_repositories(
    existing: list[dict[str, Any]],
    new: Sequence[RepositoryDescriptor],
) -> list[dict[str, Any]]:
    """Append new repositories to an existing list without duplicating any.

    Existing entries are kept verbatim and in order, whatever their type.
    New descriptors are appended in the order given, skipping any whose
    (type, url) is already present.

    Args:
        existing: The manifest's current repositories (may be empty)
        new: Descriptors found by the locator, in dependency order

    Returns:
        The existing list itself when nothing was added, otherwise a new list
    """
    if not new:
        return existing

    seen = {_identity(entry) for entry in existing}
    merged = list(existing)
    for descriptor in new:
        if descriptor.identity() in seen:
            continue
        seen.add(descriptor.identity())
        merged.append(descriptor.to_dict())

    if len(merged) == len(existing):
        return existing
    return merged


def _identity(entry: dict[str, Any]) -> tuple[str, str] | None:
    if "type" not in entry or "url" not in entry:
        return None
    return (str(entry["type"]), str(entry["url"]))
