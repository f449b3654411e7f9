"""CLI for exercising the airport search endpoint."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from flight_alert_search.config import settings

from .client import AirportClient
from .errors import AirportSearchError
from .popular_airports import match_popular
from .sink import error_message_for

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _print_airports(airports: list) -> None:  # type: ignore[type-arg]
    if not airports:
        click.echo("No airports found.")
        return
    click.echo(f"\nFound {len(airports)} airport(s):\n")
    for i, ap in enumerate(airports, 1):
        click.echo(f"  {i}. {ap.iata_code} | {ap.display_name} | {ap.full_name}")


@click.group()
@click.option("--base-url", default=None, help="Override the search host")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None) -> None:
    """Flight Alert airport search CLI."""
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url


@cli.command("search")
@click.argument("query")
@click.option("--limit", default=10, show_default=True, help="Results per page")
@click.option("--page", default=1, show_default=True, help="Result page")
@click.option("--json-output", is_flag=True, help="Output as JSON")
@click.pass_context
def search(
    ctx: click.Context, query: str, limit: int, page: int, json_output: bool
) -> None:
    """Search airports matching QUERY."""

    async def _run():  # type: ignore[return]
        client = AirportClient(base_url=ctx.obj["base_url"])
        try:
            return await client.search(query, limit=limit, page=page)
        finally:
            await client.close()

    try:
        airports = asyncio.run(_run())
    except AirportSearchError as exc:
        click.echo(f"Error: {error_message_for(exc)} ({exc})", err=True)
        sys.exit(1)

    if json_output:
        click.echo(
            json.dumps([ap.model_dump(mode="json") for ap in airports], indent=2)
        )
    else:
        _print_airports(airports)


@cli.command("debug-search")
@click.argument("query")
@click.pass_context
def debug_search(ctx: click.Context, query: str) -> None:
    """Print the raw HTTP response for QUERY."""

    async def _run():  # type: ignore[return]
        client = AirportClient(base_url=ctx.obj["base_url"])
        try:
            return await client.fetch_raw(query)
        finally:
            await client.close()

    try:
        resp = asyncio.run(_run())
    except AirportSearchError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"URL: {resp.request.url}")
    click.echo(f"HTTP Status: {resp.status_code}")
    click.echo("Headers:")
    for name, value in resp.headers.items():
        click.echo(f"  {name}: {value}")
    click.echo(f"Raw Response: {resp.text}")


@cli.command("popular")
@click.argument("query", required=False, default="")
def popular(query: str) -> None:
    """List built-in popular airports, optionally filtered by QUERY."""
    _print_airports(match_popular(query))


@cli.command("health")
@click.pass_context
def health_check(ctx: click.Context) -> None:
    """Check whether the airport search endpoint is reachable."""

    async def _run() -> bool:
        client = AirportClient(base_url=ctx.obj["base_url"])
        try:
            return await client.health_check()
        finally:
            await client.close()

    ok = asyncio.run(_run())
    click.echo(f"  Airport search: {'OK' if ok else 'FAIL'}")
    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
