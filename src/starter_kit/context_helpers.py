"""Helper for getting the StarterKitContext inside a click command.

Tests put a pre-built context in `obj` when invoking the CLI. In production
`obj` is empty and a real context is created for the project being
installed into.
"""

from pathlib import Path

import click

from starter_kit.context import StarterKitContext, create_context
from starter_kit.settings import get_settings_path, load_settings

DEBUG_META_KEY = "starter_kit.debug"


def is_debug(click_ctx: click.Context) -> bool:
    """Whether --debug (or STARTER_KIT_DEBUG) was given to the root command."""
    return bool(click_ctx.meta.get(DEBUG_META_KEY, False))


def get_or_create_context(click_ctx: click.Context, project_dir: Path) -> StarterKitContext:
    """Return the injected context, or create the production one.

    Args:
        click_ctx: Current click context
        project_dir: Project that composer commands should run in

    Returns:
        StarterKitContext for this command

    Raises:
        SettingsError: If the settings file is malformed
    """
    if isinstance(click_ctx.obj, StarterKitContext):
        return click_ctx.obj

    settings = load_settings(get_settings_path())
    click_ctx.obj = create_context(project_dir, settings, debug=is_debug(click_ctx))
    return click_ctx.obj
