"""Debug logging switch shared by all commands."""

import logging
import os

DEBUG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def is_debug_requested(flag: bool) -> bool:
    """Debug is on with --debug or when STARTER_KIT_DEBUG is set."""
    return flag or bool(os.getenv("STARTER_KIT_DEBUG"))


def configure_logging(debug: bool) -> None:
    """Send debug records to stderr when debugging, otherwise warnings only."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
