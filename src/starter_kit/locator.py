"""Find where a dependency can be installed from.

A package found on the public index needs nothing extra. Otherwise the
hosting providers are probed in order and the first one that answers becomes
a `vcs` repository for composer.json.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from starter_kit.integrations.http_probe.abc import HttpProbe
from starter_kit.models.repository import RepositoryDescriptor
from starter_kit.settings import InstallerSettings

logger = logging.getLogger(__name__)

LocateStatus = Literal["index", "vcs", "not_found"]


def split_package(package: str) -> tuple[str, str] | None:
    """Split a composer package name into (vendor, name).

    Returns:
        The two parts, or None if package is not in vendor/name form
    """
    parts = package.split("/")
    if len(parts) != 2:
        return None
    vendor, name = parts
    if not vendor.strip() or not name.strip():
        return None
    return vendor, name


@dataclass(frozen=True)
class HostingProvider:
    """A VCS host whose repositories live at https://{host}/{vendor}/{name}."""

    host: str

    def repository_url(self, vendor: str, name: str) -> str:
        """Canonical repository URL for a package on this host."""
        return f"https://{self.host}/{vendor}/{name}"


@dataclass(frozen=True)
class LocateResult:
    """Where a package was found.

    Attributes:
        package: The package that was located
        status: "index" (installable by name), "vcs" (repository needed) or
            "not_found" (neither the index nor any provider answered)
        repository: The repository to add, only for status "vcs"
        probed: Every URL probed, in order
    """

    package: str
    status: LocateStatus
    repository: RepositoryDescriptor | None
    probed: tuple[str, ...]


class RepositoryLocator:
    """Resolve packages against the public index, then hosting providers."""

    def __init__(
        self,
        http_probe: HttpProbe,
        *,
        index_url: str,
        providers: Sequence[HostingProvider],
    ) -> None:
        """Create RepositoryLocator.

        Args:
            http_probe: Used for every existence check
            index_url: Index endpoint template containing `{package}`
            providers: Hosting providers in priority order
        """
        self._http_probe = http_probe
        self._index_url = index_url
        self._providers = tuple(providers)

    @staticmethod
    def from_settings(http_probe: HttpProbe, settings: InstallerSettings) -> "RepositoryLocator":
        """Create a locator configured from installer settings."""
        return RepositoryLocator(
            http_probe,
            index_url=settings.package_index_url,
            providers=[HostingProvider(host) for host in settings.providers],
        )

    def locate(self, package: str) -> LocateResult:
        """Find where package can be installed from.

        Probes stop at the first success: providers after the winning one are
        never contacted.

        Args:
            package: Composer package name (vendor/name)

        Returns:
            LocateResult describing the outcome
        """
        probed: list[str] = []

        parts = split_package(package)
        if parts is None:
            logger.debug("Package %s is not vendor/name, skipping probes", package)
            return LocateResult(package=package, status="not_found", repository=None, probed=())
        vendor, name = parts

        index_url = self._index_url.format(package=f"{vendor}/{name}")
        probed.append(index_url)
        if self._http_probe.probe(index_url):
            logger.debug("Package %s found on the package index", package)
            return LocateResult(
                package=package, status="index", repository=None, probed=tuple(probed)
            )

        for provider in self._providers:
            url = provider.repository_url(vendor, name)
            probed.append(url)
            if self._http_probe.probe(url):
                logger.debug("Package %s found at %s", package, url)
                return LocateResult(
                    package=package,
                    status="vcs",
                    repository=RepositoryDescriptor.vcs(url),
                    probed=tuple(probed),
                )

        logger.debug("Package %s not found on the index or any provider", package)
        return LocateResult(
            package=package, status="not_found", repository=None, probed=tuple(probed)
        )
