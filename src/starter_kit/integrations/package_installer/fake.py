"""Fake PackageInstaller for testing."""

from dataclasses import dataclass
from pathlib import Path

from starter_kit.errors import PackageInstallError
from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.integrations.package_installer.abc import PackageInstaller
from starter_kit.io.manifest import load_manifest, save_manifest


@dataclass(frozen=True)
class RequireCall:
    """A recorded require() call."""

    package: str
    constraint: str
    dev: bool


class FakePackageInstaller(PackageInstaller):
    """Fake implementation of PackageInstaller.

    Records every call. When a file store and project directory are given it
    also behaves like composer would: the package is written to `require` or
    `require-dev` in composer.json and `vendor/{package}` is created.

    Examples:
        >>> installer = FakePackageInstaller(failing_packages={"bad/pkg"})
        >>> installer.require("statamic/ssg", "*", dev=True)
        >>> installer.required
        [RequireCall(package='statamic/ssg', constraint='*', dev=True)]
    """

    def __init__(
        self,
        *,
        file_store: FileStore | None = None,
        project_dir: Path | None = None,
        failing_packages: set[str] | None = None,
    ) -> None:
        """Create FakePackageInstaller.

        Args:
            file_store: Store to mimic composer's side effects in (optional)
            project_dir: Project whose composer.json and vendor/ are updated
            failing_packages: Packages whose require/remove raise PackageInstallError
        """
        self._file_store = file_store
        self._project_dir = project_dir
        self._failing_packages = failing_packages or set()
        self._required: list[RequireCall] = []
        self._removed: list[str] = []

    @property
    def required(self) -> list[RequireCall]:
        """Successful require() calls, in order."""
        return list(self._required)

    @property
    def removed(self) -> list[str]:
        """Successful remove() calls, in order."""
        return list(self._removed)

    def require(self, package: str, constraint: str, *, dev: bool) -> None:
        if package in self._failing_packages:
            raise PackageInstallError(package, "Could not find a matching version")

        self._required.append(RequireCall(package=package, constraint=constraint, dev=dev))

        if self._file_store is None or self._project_dir is None:
            return

        manifest = load_manifest(self._file_store, self._project_dir)
        require_key = "require-dev" if dev else "require"
        section = dict(manifest.get(require_key, {}))
        section[package] = constraint
        manifest[require_key] = section
        save_manifest(self._file_store, self._project_dir, manifest)
        self._file_store.make_dirs(self._project_dir / "vendor" / package)

    def remove(self, package: str) -> None:
        if package in self._failing_packages:
            raise PackageInstallError(package, "Package could not be removed")

        self._removed.append(package)

        if self._file_store is None or self._project_dir is None:
            return

        manifest = load_manifest(self._file_store, self._project_dir)
        for require_key in ("require", "require-dev"):
            if require_key in manifest and package in manifest[require_key]:
                section = dict(manifest[require_key])
                del section[package]
                manifest[require_key] = section
        save_manifest(self._file_store, self._project_dir, manifest)
        self._file_store.delete(self._project_dir / "vendor" / package)
