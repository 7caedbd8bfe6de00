"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from starter_kit.context import StarterKitContext
from starter_kit.errors import StarterKitError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - StarterKitError: Validation, copy, lock and settings failures
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces. When the
    command's StarterKitContext has debug set, well-known exceptions bubble up
    too, so the full stack trace is shown.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (StarterKitError, FileNotFoundError, ValueError, PermissionError) as e:
            if _is_debug_context():
                raise
            logger.debug("Exception details:", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]


def _is_debug_context() -> bool:
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is None:
        return False
    return isinstance(click_ctx.obj, StarterKitContext) and click_ctx.obj.debug
