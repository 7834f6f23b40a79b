"""Window a JSON array of numbers into a relay connection."""

import asyncio
import json
import sys
from typing import IO

import click

from relay_connection.cli.utils import coro, error
from relay_connection.core.exceptions import AppException
from relay_connection.core.pagination.strategies import number_connection
from relay_connection.core.pagination.types import ConnectionArguments, ConnectionOptions


def _load_numbers(source: IO[str]) -> list[int]:
    payload = json.load(source)
    if not isinstance(payload, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in payload
    ):
        raise click.BadParameter("input must be a JSON array of integers", param_hint="SOURCE")
    return payload


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--first", type=int, default=None, help="Return at most N nodes from the start")
@click.option("--last", type=int, default=None, help="Return at most N nodes from the end")
@click.option("--after", default=None, help="Only nodes after this cursor")
@click.option("--before", default=None, help="Only nodes before this cursor")
@click.option("--sorted/--unsorted", "is_sorted", default=False, help="Input is already ordered")
@click.option("--desc", is_flag=True, help="Window in descending order")
@click.option("--compact", is_flag=True, help="Print JSON on a single line")
@coro
async def paginate(
    source: IO[str],
    first: int | None,
    last: int | None,
    after: str | None,
    before: str | None,
    is_sorted: bool,
    desc: bool,
    compact: bool,
) -> None:
    """Print the connection for a JSON array of integers read from SOURCE.

    \b
    Examples:
      echo '[5, 3, 1, 4, 2]' | relay-connection paginate --first 2
      relay-connection paginate numbers.json --last 2 --desc
    """
    args = ConnectionArguments(first=first, last=last, after=after, before=before)
    options = ConnectionOptions(sorted=is_sorted, desc=desc)

    try:
        connection = await number_connection.connection_from_promised_array(
            asyncio.to_thread(_load_numbers, source), args, options
        )
    except json.JSONDecodeError as e:
        error(f"Invalid JSON input: {e}")
        sys.exit(1)
    except AppException as e:
        error(e.detail)
        sys.exit(1)

    click.echo(connection.model_dump_json(by_alias=True, indent=None if compact else 2))
