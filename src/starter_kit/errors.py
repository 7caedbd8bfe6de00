"""Exceptions raised while installing a starter kit.

Validation errors (descriptor missing or malformed, export path missing) are
raised before anything in the destination is touched. Errors raised after that
point do not undo writes that already happened.
"""

from pathlib import Path


class StarterKitError(Exception):
    """Base class for all starter-kit errors."""


class KitNotFoundError(StarterKitError):
    """Raised when the kit's root directory cannot be found on disk."""

    def __init__(self, package: str, kit_root: Path) -> None:
        self.package = package
        self.kit_root = kit_root
        super().__init__(f"Starter kit [{package}] not found at {kit_root}")


class KitDescriptorNotFoundError(StarterKitError):
    """Raised when the kit root has no starter-kit.yaml."""

    def __init__(self, descriptor_path: Path) -> None:
        self.descriptor_path = descriptor_path
        super().__init__(f"Starter kit config not found: {descriptor_path}")


class KitDescriptorParseError(StarterKitError):
    """Raised when starter-kit.yaml exists but cannot be used."""

    def __init__(self, descriptor_path: Path, reason: str) -> None:
        self.descriptor_path = descriptor_path
        self.reason = reason
        super().__init__(f"Invalid starter kit config {descriptor_path}: {reason}")


class MissingExportPathError(StarterKitError):
    """Raised when a declared export path does not exist in the kit."""

    def __init__(self, path: str, kit_root: Path) -> None:
        self.path = path
        self.kit_root = kit_root
        super().__init__(f"Starter kit path [{path}] does not exist in {kit_root}")


class KitCopyError(StarterKitError):
    """Raised when copying kit files into the destination fails."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to copy [{path}]: {cause}")


class PackageInstallError(StarterKitError):
    """Raised by a PackageInstaller when requiring or removing a package fails."""

    def __init__(self, package: str, message: str) -> None:
        self.package = package
        self.message = message
        super().__init__(f"Error installing dependency [{package}]: {message}")


class InstallInProgressError(StarterKitError):
    """Raised when another install already holds the destination lock."""

    def __init__(self, project_dir: Path) -> None:
        self.project_dir = project_dir
        super().__init__(f"Another starter kit install is running in {project_dir}")


class SettingsError(StarterKitError):
    """Raised when the installer settings file is malformed."""

    def __init__(self, config_path: Path, reason: str) -> None:
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Invalid settings in {config_path}: {reason}")
