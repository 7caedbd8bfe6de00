"""Copy plan models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

EntryKind = Literal["file", "directory"]


@dataclass(frozen=True)
class CopyEntry:
    """One declared export path, resolved against the kit root.

    Attributes:
        source: Absolute path inside the kit
        destination: Path relative to the destination project root
        kind: "directory" entries are merged recursively, "file" entries overwrite
    """

    source: Path
    destination: str
    kind: EntryKind


@dataclass(frozen=True)
class CopyPlan:
    """Validated, ordered list of copy entries.

    Directories are not expanded here; the merger walks them when the plan
    is applied.
    """

    kit_root: Path
    entries: tuple[CopyEntry, ...]

    def destinations(self) -> list[str]:
        """Relative destination path of every entry, in copy order."""
        return [entry.destination for entry in self.entries]
