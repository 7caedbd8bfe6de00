"""Fake in-memory FileStore for testing."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from starter_kit.errors import InstallInProgressError
from starter_kit.integrations.file_store.abc import FileStore


class FakeFileStore(FileStore):
    """In-memory fake implementation of FileStore.

    Constructor Injection:
    - Initial files are provided via constructor parameters
    - Mutations are tracked in read-only properties

    Examples:
        >>> store = FakeFileStore(files={Path("/kit/copied.md"): "Copied"})
        >>> store.copy_file(Path("/kit/copied.md"), Path("/site/copied.md"))
        >>> assert store.files[Path("/site/copied.md")] == "Copied"
        >>> assert store.writes == [Path("/site/copied.md")]
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        directories: set[Path] | None = None,
        failing_paths: set[Path] | None = None,
    ) -> None:
        """Create FakeFileStore.

        Args:
            files: Initial file contents (absolute path -> text)
            directories: Extra (possibly empty) directories that exist
            failing_paths: Destinations whose writes raise PermissionError
        """
        self._files: dict[Path, str] = dict(files or {})
        self._directories: set[Path] = set(directories or set())
        self._failing_paths = failing_paths or set()
        self._writes: list[Path] = []
        self._deletes: list[Path] = []
        self._held_locks: set[Path] = set()
        self._lock_history: list[Path] = []

    @property
    def files(self) -> dict[Path, str]:
        """Current file contents for test assertions."""
        return self._files.copy()

    @property
    def writes(self) -> list[Path]:
        """Every path written or copied to, in order."""
        return list(self._writes)

    @property
    def deletes(self) -> list[Path]:
        """Every path deleted, in order."""
        return list(self._deletes)

    @property
    def lock_history(self) -> list[Path]:
        """Directories that were locked, in order."""
        return list(self._lock_history)

    def exists(self, path: Path) -> bool:
        return path in self._files or self.is_dir(path)

    def is_dir(self, path: Path) -> bool:
        if path in self._directories:
            return True
        return any(path in f.parents for f in self._files) or any(
            path in d.parents for d in self._directories
        )

    def read_text(self, path: Path) -> str:
        if path not in self._files:
            raise FileNotFoundError(f"No such file: {path}")
        return self._files[path]

    def write_text(self, path: Path, content: str) -> None:
        self._check_writable(path)
        self._files[path] = content
        self._writes.append(path)

    def copy_file(self, source: Path, destination: Path) -> None:
        content = self.read_text(source)
        self.write_text(destination, content)

    def walk_files(self, directory: Path) -> Iterator[Path]:
        yield from sorted(f.relative_to(directory) for f in self._files if directory in f.parents)

    def make_dirs(self, path: Path) -> None:
        self._directories.add(path)

    def delete(self, path: Path) -> None:
        if not self.exists(path):
            return
        self._deletes.append(path)
        self._files = {
            f: content for f, content in self._files.items() if f != path and path not in f.parents
        }
        self._directories = {d for d in self._directories if d != path and path not in d.parents}

    @contextmanager
    def lock(self, directory: Path) -> Iterator[None]:
        if directory in self._held_locks:
            raise InstallInProgressError(directory)
        self._held_locks.add(directory)
        self._lock_history.append(directory)
        try:
            yield
        finally:
            self._held_locks.discard(directory)

    def _check_writable(self, path: Path) -> None:
        if path in self._failing_paths:
            raise PermissionError(f"Permission denied: {path}")
