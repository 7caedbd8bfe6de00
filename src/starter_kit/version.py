"""Version information for starter-kit."""

__version__ = "0.1.0"
