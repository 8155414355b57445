"""hmcal CLI - holiday calendar."""

import logging
import sys
from datetime import date

import click

from .config import DISPLAY_MODES, LIST_FORMATS, load_config
from .core.calendar import View, render_view
from .errors import HolidayMapError
from .format import format_calendar, format_listing
from .workflows import (
    add_holiday,
    delete_holiday,
    fetcher,
    get_store,
    load_or_fetch,
    refresh,
    resolve_key,
)

country_option = click.option(
    "--country", "-c", default=None, help="ISO country code (default: AR, via Argentina-Datos)"
)
year_option = click.option("--year", "-y", type=int, default=None, help="Year to use (default: current year)")
refresh_option = click.option("--refresh", "force_refresh", is_flag=True, help="Refetch official holidays, keeping custom ones")


def _fail(e: HolidayMapError) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _load(country: str | None, year: int | None, force_refresh: bool = False):
    """Resolve the cache key and load its holidays."""
    config = load_config()
    key = resolve_key(country or config.country, year)
    store = get_store(config)
    if force_refresh:
        return key, refresh(store, key, fetcher(key))
    return key, load_or_fetch(store, key, fetcher(key))


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="hmcal")
@click.pass_context
def main(ctx, debug: bool):
    """hmcal - calendar with public and custom holidays."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    if ctx.invoked_subcommand is None:
        ctx.invoke(display)


@main.command()
@click.argument("day", type=int)
@click.argument("month", type=int)
@click.option("--name", "-n", default=None, help="Holiday name (default: 'Custom holiday')")
@country_option
@year_option
def add(day: int, month: int, name: str | None, country: str | None, year: int | None):
    """Add a custom holiday on DAY MONTH."""
    config = load_config()
    try:
        key = resolve_key(country or config.country, year)
        add_holiday(get_store(config), key, day, month, fetcher(key), name=name)
    except HolidayMapError as e:
        _fail(e)
    click.echo("OK")


@main.command()
@click.argument("day", type=int)
@click.argument("month", type=int)
@country_option
@year_option
def delete(day: int, month: int, country: str | None, year: int | None):
    """Delete the custom holiday on DAY MONTH."""
    config = load_config()
    try:
        key = resolve_key(country or config.country, year)
        delete_holiday(get_store(config), key, day, month)
    except HolidayMapError as e:
        _fail(e)
    click.echo("OK")


@main.command("list")
@country_option
@year_option
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice(LIST_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: table)",
)
@refresh_option
def list_holidays(country: str | None, year: int | None, fmt: str | None, force_refresh: bool):
    """List the year's holidays."""
    try:
        key, holidays = _load(country, year, force_refresh)
    except HolidayMapError as e:
        _fail(e)
    fmt = (fmt or load_config().list_format).lower()
    click.echo(format_listing(holidays.records(), key.year, fmt))


@main.command()
@click.argument("mode", required=False, type=click.Choice([*DISPLAY_MODES, "quarter"], case_sensitive=False))
@click.option("--number", "-n", type=int, default=None, help="Quarter (1-4) or month (1-12) to show")
@country_option
@year_option
@refresh_option
def display(mode: str | None, number: int | None, country: str | None, year: int | None, force_refresh: bool):
    """Show a quarter (q), a month, or the whole year."""
    today = date.today()
    try:
        view = View.parse(mode or load_config().display_mode, number)
        key, holidays = _load(country, year, force_refresh)
        grids = render_view(holidays, view, key.year, today)
    except HolidayMapError as e:
        _fail(e)
    click.echo(format_calendar(grids, today))


if __name__ == "__main__":
    main()
