"""Application context with dependency injection.

StarterKitContext holds every integration an install needs. It is created
once at CLI entry point with create_context() and passed down explicitly;
tests build one with StarterKitContext.for_test().
"""

from dataclasses import dataclass
from pathlib import Path

from starter_kit.integrations.file_store.abc import FileStore
from starter_kit.integrations.http_probe.abc import HttpProbe
from starter_kit.integrations.package_installer.abc import PackageInstaller
from starter_kit.settings import InstallerSettings


@dataclass(frozen=True)
class StarterKitContext:
    """Immutable context holding all dependencies for starter-kit operations.

    Attributes:
        file_store: Filesystem access for kit and project files
        http_probe: Existence checks against the index and hosting providers
        package_installer: The project's package manager
        settings: Installer settings
        debug: Show full stack traces instead of clean error messages
    """

    file_store: FileStore
    http_probe: HttpProbe
    package_installer: PackageInstaller
    settings: InstallerSettings
    debug: bool

    @staticmethod
    def for_test(
        file_store: FileStore | None = None,
        http_probe: HttpProbe | None = None,
        package_installer: PackageInstaller | None = None,
        settings: InstallerSettings | None = None,
        debug: bool = False,
    ) -> "StarterKitContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes for anything not given, so no network or subprocess calls
        are made.

        Args:
            file_store: Optional FileStore. If None, creates an empty FakeFileStore.
            http_probe: Optional HttpProbe. If None, creates FakeHttpProbe (all 404).
            package_installer: Optional PackageInstaller. If None, creates a
                FakePackageInstaller that only records calls.
            settings: Optional settings (defaults to InstallerSettings())
            debug: Whether to enable debug mode (default False)

        Returns:
            StarterKitContext configured with provided values and test defaults
        """
        from starter_kit.integrations.file_store.fake import FakeFileStore
        from starter_kit.integrations.http_probe.fake import FakeHttpProbe
        from starter_kit.integrations.package_installer.fake import FakePackageInstaller

        resolved_file_store: FileStore = file_store if file_store is not None else FakeFileStore()
        resolved_http_probe: HttpProbe = http_probe if http_probe is not None else FakeHttpProbe()
        resolved_installer: PackageInstaller = (
            package_installer if package_installer is not None else FakePackageInstaller()
        )
        resolved_settings = settings if settings is not None else InstallerSettings()

        return StarterKitContext(
            file_store=resolved_file_store,
            http_probe=resolved_http_probe,
            package_installer=resolved_installer,
            settings=resolved_settings,
            debug=debug,
        )


def create_context(
    project_dir: Path,
    settings: InstallerSettings,
    *,
    debug: bool,
) -> StarterKitContext:
    """Create production context with real implementations.

    Args:
        project_dir: Project that composer commands run in
        settings: Loaded installer settings
        debug: If True, enable debug mode (full stack traces in error handling)

    Returns:
        StarterKitContext with real filesystem, HTTP and composer integrations
    """
    from starter_kit.integrations.file_store.real import RealFileStore
    from starter_kit.integrations.http_probe.real import RealHttpProbe
    from starter_kit.integrations.package_installer.real import ComposerPackageInstaller

    return StarterKitContext(
        file_store=RealFileStore(),
        http_probe=RealHttpProbe(timeout=settings.probe_timeout),
        package_installer=ComposerPackageInstaller(
            project_dir, composer_binary=settings.composer_binary
        ),
        settings=settings,
        debug=debug,
    )
