"""CLI commands for starter-kit."""
