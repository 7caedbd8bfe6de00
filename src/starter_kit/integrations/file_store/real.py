"""Production FileStore backed by the local filesystem."""

import fcntl
import logging
import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from starter_kit.errors import InstallInProgressError
from starter_kit.integrations.file_store.abc import FileStore

logger = logging.getLogger(__name__)


class RealFileStore(FileStore):
    """FileStore that reads and writes the real filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write through a temporary sibling, then rename over path."""
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(path)

    def copy_file(self, source: Path, destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)

    def walk_files(self, directory: Path) -> Iterator[Path]:
        files = [p.relative_to(directory) for p in directory.rglob("*") if p.is_file()]
        yield from sorted(files)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def delete(self, path: Path) -> None:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)

    @contextmanager
    def lock(self, directory: Path) -> Iterator[None]:
        """flock the directory itself so no lock file is left in the project."""
        fd = os.open(directory, os.O_RDONLY)
        try:
            try:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
            except BlockingIOError:
                raise InstallInProgressError(directory) from None
            logger.debug("Acquired install lock on %s", directory)
            try:
                yield
            finally:
                fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)
