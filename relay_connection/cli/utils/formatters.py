"""Output formatting utilities for CLI commands."""

import click


def error(message: str) -> None:
    """Print an error message in red."""
    click.secho(f"✗ {message}", fg="red", err=True)
