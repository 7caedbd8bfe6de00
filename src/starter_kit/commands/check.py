"""Check command for validating a kit without installing it."""

from pathlib import Path

import click

from starter_kit.context_helpers import get_or_create_context
from starter_kit.error_boundary import cli_error_boundary
from starter_kit.io.descriptor import load_kit_config
from starter_kit.operations.plan import plan_exports


@click.command()
@click.argument("kit_path", type=click.Path(file_okay=False, path_type=Path))
@click.pass_context
@cli_error_boundary
def check(ctx: click.Context, kit_path: Path) -> None:
    """Validate a kit's starter-kit.yaml and export paths.

    Nothing is copied and no dependency is looked up.
    """
    starter_ctx = get_or_create_context(ctx, Path.cwd())
    file_store = starter_ctx.file_store

    if not file_store.is_dir(kit_path):
        raise FileNotFoundError(f"Kit directory does not exist: {kit_path}")

    config = load_kit_config(file_store, kit_path)
    plan = plan_exports(file_store, kit_path, config)

    click.echo(f"Export paths ({len(plan.entries)}):")
    for entry in plan.entries:
        relative_source = entry.source.relative_to(kit_path).as_posix()
        if relative_source == entry.destination:
            click.echo(f"  {entry.kind:<9} {entry.destination}")
        else:
            click.echo(f"  {entry.kind:<9} {relative_source} -> {entry.destination}")

    click.echo(f"Dependencies: {len(config.dependencies)}")
    click.echo(f"Dev dependencies: {len(config.dependencies_dev)}")
    click.echo(f"✓ Starter kit at {kit_path} is valid")
