"""Install a starter kit into a project.

The install runs through these phases:

    IDLE -> VALIDATING -> COPYING -> INSTALLING_DEPS -> FINALIZING -> DONE

Everything that can be checked without writing is checked in VALIDATING:
the kit root, its starter-kit.yaml, every export path, and the project's
composer.json. A failure there leaves the project untouched (ABORTED).
Later phases are best-effort: a failure stops the install but files already
copied or packages already required stay in place.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from starter_kit.context import StarterKitContext
from starter_kit.errors import KitCopyError, PackageInstallError, StarterKitError
from starter_kit.io.descriptor import get_descriptor_path, load_kit_config
from starter_kit.io.manifest import (
    get_repositories,
    load_manifest,
    save_manifest,
    with_repositories,
)
from starter_kit.locator import RepositoryLocator
from starter_kit.models.config import KitConfig
from starter_kit.models.plan import CopyPlan
from starter_kit.models.result import DependencyFailure, InstallResult, InstallState
from starter_kit.operations.merge import apply_plan
from starter_kit.operations.plan import plan_exports
from starter_kit.operations.reconcile import reconcile_repositories
from starter_kit.sources import is_vendored_kit, resolve_kit_root

logger = logging.getLogger(__name__)

StateListener = Callable[[InstallState], None]


@dataclass(frozen=True)
class InstallRequest:
    """What to install and how.

    Attributes:
        package: Kit package name (vendor/name)
        project_dir: Destination project root
        kit_path: Directory holding the kit; defaults to vendor/{package}
        with_config: Also copy starter-kit.yaml into the project
        clear_site: Delete the project's content paths before copying
        keep_package: Leave a vendored kit installed as a composer dependency
    """

    package: str
    project_dir: Path
    kit_path: Path | None = None
    with_config: bool = False
    clear_site: bool = False
    keep_package: bool = False


@dataclass(frozen=True)
class _ValidatedKit:
    kit_root: Path
    config: KitConfig
    plan: CopyPlan


class StarterKitInstaller:
    """Runs one starter kit install at a time against a project."""

    def __init__(
        self,
        ctx: StarterKitContext,
        *,
        on_state_change: StateListener | None = None,
    ) -> None:
        """Create StarterKitInstaller.

        Args:
            ctx: Integrations and settings to use
            on_state_change: Called with each new phase (for progress output)
        """
        self._ctx = ctx
        self._on_state_change = on_state_change
        self._locator = RepositoryLocator.from_settings(ctx.http_probe, ctx.settings)

    def install(self, request: InstallRequest) -> InstallResult:
        """Install a starter kit.

        Args:
            request: What to install

        Returns:
            InstallResult in state DONE. Dependencies that could not be
            required are listed in `failed`, packages found nowhere in
            `unresolved`.

        Raises:
            FileNotFoundError: If the project directory doesn't exist
            InstallInProgressError: If another install holds the project lock
            KitNotFoundError, KitDescriptorNotFoundError, KitDescriptorParseError,
            MissingExportPathError, ValueError: Validation failures. Nothing
                in the project has been changed.
            KitCopyError: If copying fails. Earlier copies are not undone.
        """
        file_store = self._ctx.file_store
        if not file_store.is_dir(request.project_dir):
            raise FileNotFoundError(f"Project directory does not exist: {request.project_dir}")

        result = InstallResult(package=request.package)

        with file_store.lock(request.project_dir):
            validated = self._validate(request, result)

            self._transition(result, InstallState.COPYING)
            result.copied = apply_plan(
                file_store,
                validated.plan,
                request.project_dir,
                clear_first=request.clear_site,
                clear_paths=self._ctx.settings.clear_paths,
            )

            self._transition(result, InstallState.INSTALLING_DEPS)
            for package, constraint, dev in validated.config.all_dependencies():
                self._install_dependency(request.project_dir, package, constraint, dev, result)

            self._transition(result, InstallState.FINALIZING)
            self._finalize(request, validated.kit_root, result)

        self._transition(result, InstallState.DONE)
        return result

    def _validate(self, request: InstallRequest, result: InstallResult) -> _ValidatedKit:
        self._transition(result, InstallState.VALIDATING)
        file_store = self._ctx.file_store
        try:
            kit_root = resolve_kit_root(
                file_store, request.package, request.project_dir, request.kit_path
            )
            config = load_kit_config(file_store, kit_root)
            plan = plan_exports(file_store, kit_root, config)
            if config.all_dependencies():
                # Fail now rather than after copying if composer.json is unusable
                get_repositories(load_manifest(file_store, request.project_dir))
        except (StarterKitError, ValueError):
            self._transition(result, InstallState.ABORTED)
            raise
        return _ValidatedKit(kit_root=kit_root, config=config, plan=plan)

    def _install_dependency(
        self,
        project_dir: Path,
        package: str,
        constraint: str,
        dev: bool,
        result: InstallResult,
    ) -> None:
        located = self._locator.locate(package)

        if located.status == "not_found":
            result.unresolved.append(package)
            if self._ctx.settings.unresolved_policy == "skip":
                logger.warning(
                    "Skipping %s: not found on the package index or any provider", package
                )
                return

        file_store = self._ctx.file_store
        original_manifest: dict[str, Any] | None = None
        added_url: str | None = None

        if located.repository is not None:
            manifest = load_manifest(file_store, project_dir)
            existing = get_repositories(manifest)
            merged = reconcile_repositories(existing, [located.repository])
            if merged is not existing:
                save_manifest(file_store, project_dir, with_repositories(manifest, merged))
                original_manifest = manifest
                added_url = located.repository.url
                result.repositories_added.append(added_url)

        logger.debug("Requiring %s:%s (dev=%s)", package, constraint, dev)
        try:
            self._ctx.package_installer.require(package, constraint, dev=dev)
        except PackageInstallError as e:
            logger.warning("Failed to require %s: %s", package, e.message)
            result.failed.append(DependencyFailure(package=package, message=e.message))
            if original_manifest is not None and added_url is not None:
                self._restore_repositories(project_dir, original_manifest)
                result.repositories_added.remove(added_url)
            return

        result.required.append(package)

    def _restore_repositories(self, project_dir: Path, original: dict[str, Any]) -> None:
        """Put composer.json's repositories back to what they were before reconciling."""
        file_store = self._ctx.file_store
        current = load_manifest(file_store, project_dir)
        restored = dict(current)
        if "repositories" in original:
            restored["repositories"] = original["repositories"]
        elif "repositories" in restored:
            del restored["repositories"]
        save_manifest(file_store, project_dir, restored)

    def _finalize(self, request: InstallRequest, kit_root: Path, result: InstallResult) -> None:
        file_store = self._ctx.file_store

        if request.with_config:
            descriptor_path = get_descriptor_path(kit_root)
            target = request.project_dir / descriptor_path.name
            try:
                file_store.copy_file(descriptor_path, target)
            except OSError as e:
                raise KitCopyError(descriptor_path.name, e) from e
            result.config_copied = True

        if request.keep_package or not is_vendored_kit(
            kit_root, request.project_dir, request.package
        ):
            return

        try:
            self._ctx.package_installer.remove(request.package)
        except PackageInstallError as e:
            logger.warning(
                "Failed to remove starter kit package %s: %s", request.package, e.message
            )
            result.cleanup_error = e.message
            return
        result.package_removed = True

    def _transition(self, result: InstallResult, state: InstallState) -> None:
        logger.debug("Install %s: %s -> %s", result.package, result.state.value, state.value)
        result.state = state
        if self._on_state_change is not None:
            self._on_state_change(state)
