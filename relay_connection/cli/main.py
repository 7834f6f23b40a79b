"""Main CLI entry point for relay-connection."""

import click

from relay_connection import __version__
from relay_connection.cli.commands import cursor, paginate
from relay_connection.infra.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="relay-connection")
@click.option("--log-level", default=None, help="Override LOG_LEVEL for this run")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """relay-connection - Relay cursor pagination over JSON arrays.

    \b
    Commands:
      paginate   Window a JSON array of integers into a connection
      cursor     Encode and decode number cursors

    \b
    Quick Start:
      echo '[1, 2, 3, 4, 5]' | relay-connection paginate --first 2
      relay-connection cursor encode 3
    """
    ctx.ensure_object(dict)
    if log_level:
        setup_logging(force=True, log_level=log_level.upper())


cli.add_command(paginate.paginate)
cli.add_command(cursor.cursor)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
