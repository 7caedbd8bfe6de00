"""Abstract base class for filesystem access."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager
from pathlib import Path


class FileStore(ABC):
    """Abstract interface for the filesystem operations an install performs.

    Implementations include:
    - RealFileStore: pathlib/shutil backed, used in production
    - FakeFileStore: In-memory for testing
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path is an existing directory."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write UTF-8 text to path, creating parent directories as needed."""
        ...

    @abstractmethod
    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a single file, replacing any existing destination file.

        Parent directories of destination are created as needed.
        """
        ...

    @abstractmethod
    def walk_files(self, directory: Path) -> Iterator[Path]:
        """Yield every file under directory as a path relative to it, sorted."""
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and its parents. No-op if it already exists."""
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """Delete a file or a whole directory tree. No-op if path is absent."""
        ...

    @abstractmethod
    def lock(self, directory: Path) -> AbstractContextManager[None]:
        """Hold an exclusive lock on directory for the duration of the block.

        Raises:
            InstallInProgressError: If the lock is already held
        """
        ...
