"""Production PackageInstaller that shells out to composer."""

import logging
from pathlib import Path

from starter_kit.errors import PackageInstallError
from starter_kit.integrations.package_installer.abc import PackageInstaller
from starter_kit.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)


class ComposerPackageInstaller(PackageInstaller):
    """Run `composer require` / `composer remove` inside the project."""

    def __init__(self, project_dir: Path, *, composer_binary: str = "composer") -> None:
        self._project_dir = project_dir
        self._composer_binary = composer_binary

    def require(self, package: str, constraint: str, *, dev: bool) -> None:
        cmd = [self._composer_binary, "require", f"{package}:{constraint}", "--no-interaction"]
        if dev:
            cmd.append("--dev")
        self._run(cmd, package, f"require {package}")

    def remove(self, package: str) -> None:
        cmd = [self._composer_binary, "remove", package, "--no-interaction"]
        self._run(cmd, package, f"remove {package}")

    def _run(self, cmd: list[str], package: str, operation: str) -> None:
        logger.debug("Running %s in %s", " ".join(cmd), self._project_dir)
        try:
            run_subprocess_with_context(cmd, operation, cwd=self._project_dir)
        except RuntimeError as e:
            raise PackageInstallError(package, str(e)) from e
