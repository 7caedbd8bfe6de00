import click

from starter_kit import __version__
from starter_kit.commands.check import check
from starter_kit.commands.install import install
from starter_kit.commands.locate import locate
from starter_kit.context_helpers import DEBUG_META_KEY
from starter_kit.logging_setup import configure_logging, is_debug_requested

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging and full error details.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Install starter kits into composer projects."""
    debug = is_debug_requested(debug)
    ctx.meta[DEBUG_META_KEY] = debug
    configure_logging(debug)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register top-level commands
cli.add_command(install)
cli.add_command(check)
cli.add_command(locate)


if __name__ == "__main__":
    cli()
