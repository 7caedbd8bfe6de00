"""Install command for applying a starter kit to a project."""

from pathlib import Path

import click

from starter_kit.context_helpers import get_or_create_context
from starter_kit.error_boundary import cli_error_boundary
from starter_kit.installer import InstallRequest, StarterKitInstaller
from starter_kit.models.result import InstallResult, InstallState

STATE_MESSAGES = {
    InstallState.VALIDATING: "Preparing starter kit...",
    InstallState.COPYING: "Installing files...",
    InstallState.INSTALLING_DEPS: "Installing dependencies...",
}


@click.command()
@click.argument("package")
@click.option(
    "--kit-path",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the kit (defaults to vendor/PACKAGE in the project).",
)
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project to install into (defaults to the current directory).",
)
@click.option("--with-config", is_flag=True, help="Copy starter-kit.yaml into the project.")
@click.option(
    "--clear-site",
    is_flag=True,
    help="Delete existing content before copying the kit's files.",
)
@click.option(
    "--keep-package",
    is_flag=True,
    help="Leave the kit itself installed as a composer dependency.",
)
@click.pass_context
@cli_error_boundary
def install(
    ctx: click.Context,
    package: str,
    kit_path: Path | None,
    project_dir: Path | None,
    with_config: bool,
    clear_site: bool,
    keep_package: bool,
) -> None:
    """Install a starter kit into a project.

    The kit's starter-kit.yaml and every path it exports are checked before
    anything is written. If any of them is missing, the project is left
    untouched.

    Examples:

        # Install a kit composer has already downloaded to vendor/
        starter-kit install statamic/cool-runnings

        # Install from a local checkout, replacing existing content
        starter-kit install statamic/cool-runnings --kit-path ../cool-runnings --clear-site
    """
    if project_dir is None:
        project_dir = Path.cwd()

    starter_ctx = get_or_create_context(ctx, project_dir)
    installer = StarterKitInstaller(starter_ctx, on_state_change=_echo_state)

    result = installer.install(
        InstallRequest(
            package=package,
            project_dir=project_dir,
            kit_path=kit_path,
            with_config=with_config,
            clear_site=clear_site,
            keep_package=keep_package,
        )
    )

    _echo_summary(result)

    if result.failed:
        raise SystemExit(1)


def _echo_state(state: InstallState) -> None:
    if state in STATE_MESSAGES:
        click.echo(STATE_MESSAGES[state])


def _echo_summary(result: InstallResult) -> None:
    count = len(result.copied)
    plural = "files" if count != 1 else "file"
    click.echo(f"  Copied {count} {plural}")

    for url in result.repositories_added:
        click.echo(f"  Added repository {url}")

    for package in result.required:
        click.echo(f"  Required {package}")

    for package in result.unresolved:
        click.echo(
            f"Warning: [{package}] was not found on the package index or any hosting provider",
            err=True,
        )

    for failure in result.failed:
        click.echo(f"Error installing dependency [{failure.package}]: {failure.message}", err=True)

    if result.config_copied:
        click.echo("  Copied starter-kit.yaml")

    if result.cleanup_error is not None:
        click.echo(
            f"Warning: could not remove starter kit package: {result.cleanup_error}", err=True
        )

    if result.failed:
        click.echo(f"Starter kit [{result.package}] installed with errors.", err=True)
    else:
        click.echo(f"✓ Starter kit [{result.package}] installed")
