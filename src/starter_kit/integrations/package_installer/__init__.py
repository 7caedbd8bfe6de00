"""Package manager integration."""

from starter_kit.integrations.package_installer.abc import PackageInstaller
from starter_kit.integrations.package_installer.fake import FakePackageInstaller, RequireCall
from starter_kit.integrations.package_installer.real import ComposerPackageInstaller

__all__ = ["ComposerPackageInstaller", "FakePackageInstaller", "PackageInstaller", "RequireCall"]
