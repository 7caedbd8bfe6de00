"""Abstract base class for the project's package manager."""

from abc import ABC, abstractmethod


class PackageInstaller(ABC):
    """Abstract interface for adding and removing project dependencies.

    Requiring a package records it in the manifest (`require` or
    `require-dev`) and materializes its files in the dependency storage area
    (`vendor/`).

    Implementations include:
    - ComposerPackageInstaller: Runs the composer binary
    - FakePackageInstaller: Records calls and mimics composer for testing
    """

    @abstractmethod
    def require(self, package: str, constraint: str, *, dev: bool) -> None:
        """Add a dependency to the project.

        Args:
            package: Package name in vendor/name form
            constraint: Version constraint (e.g. "^1.0.0", "*")
            dev: Whether to add it to require-dev instead of require

        Raises:
            PackageInstallError: If the package manager fails
        """
        ...

    @abstractmethod
    def remove(self, package: str) -> None:
        """Remove a dependency from the project.

        Raises:
            PackageInstallError: If the package manager fails
        """
        ...
