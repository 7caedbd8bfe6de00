"""Install state machine and result models."""

from dataclasses import dataclass, field
from enum import Enum


class InstallState(Enum):
    """Phases of a starter kit install.

    ABORTED is only reachable from VALIDATING, before anything is written.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    COPYING = "copying"
    INSTALLING_DEPS = "installing_deps"
    FINALIZING = "finalizing"
    DONE = "done"
    ABORTED = "aborted"


@dataclass(frozen=True)
class DependencyFailure:
    """A dependency whose require step failed."""

    package: str
    message: str


@dataclass
class InstallResult:
    """Outcome of one install, filled in as the installer advances."""

    package: str
    state: InstallState = InstallState.IDLE
    copied: list[str] = field(default_factory=list)
    required: list[str] = field(default_factory=list)
    repositories_added: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)
    failed: list[DependencyFailure] = field(default_factory=list)
    config_copied: bool = False
    package_removed: bool = False
    cleanup_error: str | None = None

    @property
    def succeeded(self) -> bool:
        """True when the install finished and every dependency was required."""
        return self.state == InstallState.DONE and not self.failed
