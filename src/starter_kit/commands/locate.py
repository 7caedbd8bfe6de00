"""Locate command for showing where dependencies would come from."""

from pathlib import Path

import click

from starter_kit.context_helpers import get_or_create_context
from starter_kit.error_boundary import cli_error_boundary
from starter_kit.locator import RepositoryLocator


@click.command()
@click.argument("packages", nargs=-1, required=True)
@click.pass_context
@cli_error_boundary
def locate(ctx: click.Context, packages: tuple[str, ...]) -> None:
    """Show whether each package is on the package index or a VCS host.

    Exits with status 1 if any package could not be found.
    """
    starter_ctx = get_or_create_context(ctx, Path.cwd())
    locator = RepositoryLocator.from_settings(starter_ctx.http_probe, starter_ctx.settings)

    missing = 0
    for package in packages:
        result = locator.locate(package)
        if result.status == "index":
            click.echo(f"{package}: package index")
        elif result.repository is not None:
            click.echo(f"{package}: vcs {result.repository.url}")
        else:
            missing += 1
            click.echo(f"{package}: not found", err=True)

    if missing:
        raise SystemExit(1)
