"""Number cursor encoding commands."""

import sys

import click

from relay_connection.cli.utils import error
from relay_connection.core.pagination.strategies import cursor_to_number, number_to_cursor


@click.group(name="cursor")
def cursor() -> None:
    """Convert between numbers and their cursors."""


@cursor.command()
@click.argument("numbers", type=int, nargs=-1, required=True)
def encode(numbers: tuple[int, ...]) -> None:
    """Print the cursor for each NUMBER."""
    for number in numbers:
        click.echo(number_to_cursor(number))


@cursor.command()
@click.argument("cursors", nargs=-1, required=True)
def decode(cursors: tuple[str, ...]) -> None:
    """Print the number behind each CURSOR."""
    failed = False
    for token in cursors:
        number = cursor_to_number(token)
        if number is None:
            error(f"Not a number cursor: {token}")
            failed = True
            continue
        click.echo(number)
    if failed:
        sys.exit(1)
