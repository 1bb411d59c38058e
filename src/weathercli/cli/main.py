"""weather-cli command line interface."""

from dataclasses import dataclass
from datetime import datetime, timezone
from functools import wraps
import logging
import sys

import click

from ..api import OpenWeatherClient
from ..config import AppConfig, load_config
from ..errors import NoCitiesFoundError, SettingsIncompleteError, WeatherCliError
from ..io.settings_store import SettingsStore
from ..model.settings import City, Unit, UserSettings
from ..program_info import (
    PROGRAM_AUTHORS,
    PROGRAM_DESCRIPTION,
    PROGRAM_NAME,
    PROGRAM_VERSION,
    PYPI_URL,
    REPOSITORY_URL,
)
from ..report import render_report

logger = logging.getLogger(__name__)

UNIT_CHOICES = {1: Unit.METRIC, 2: Unit.IMPERIAL, 3: Unit.STANDARD}


@dataclass
class CliContext:
    config: AppConfig
    store: SettingsStore


def fail(error: WeatherCliError):
    """Print the error as "ERROR: ..." and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    click.echo(f"ERROR: {error}", err=True)
    sys.exit(1)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def reports_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except WeatherCliError as e:
            fail(e)
    return wrapper


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    envvar="WEATHER_CLI_CONFIG",
    help="YAML configuration file path",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(PROGRAM_VERSION, prog_name=PROGRAM_NAME)
@click.pass_context
def cli(ctx, config, verbose):
    """* weather-cli - Minimalistic command-line weather program. It works with OpenWeather API."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        app_config = load_config(config)
    except WeatherCliError as e:
        fail(e)

    store = SettingsStore(app_config.resolved_settings_dir())
    ctx.obj = CliContext(config=app_config, store=store)

    if ctx.invoked_subcommand is None:
        click.echo(f'Please use "{PROGRAM_NAME} --help" command for help.')
        click.echo(f"- Settings Directory: {store.directory}")


@cli.command()
@click.pass_obj
@reports_errors
def check(obj: CliContext):
    """Check weather information in your city."""
    api_key = obj.store.read_api_setting().key
    settings = obj.store.read_user_settings()
    if settings.city is None or settings.unit is None:
        raise SettingsIncompleteError()

    with OpenWeatherClient(api_key, obj.config) as client:
        weather = client.current_weather(settings.city, settings.unit)

    click.echo(render_report(settings, weather, utcnow()))


def show_cities(cities):
    click.echo("\nCity list:")
    for index, city in enumerate(cities, start=1):
        click.echo(f"{index}) {city}")


def prompt_settings(cities) -> UserSettings:
    """Ask for city, unit and emoji preference. Invalid answers are re-prompted."""
    selected = click.prompt(
        "\nPlease select your city",
        type=click.IntRange(1, len(cities)),
    )
    city: City = cities[selected - 1]

    click.echo("\nDo you use Celsius, Fahrenheit or Kelvin?")
    for number, unit in UNIT_CHOICES.items():
        click.echo(f"{number}) {unit.display_name}")
    unit = UNIT_CHOICES[click.prompt("Unit", type=click.IntRange(1, len(UNIT_CHOICES)))]

    display_emoji = click.prompt(
        "\nDo you want to display emoji? (y/n)",
        type=click.Choice(["y", "n"], case_sensitive=False),
        show_choices=False,
    ).lower() == "y"

    return UserSettings(city=city, unit=unit, display_emoji=display_emoji)


@cli.command("set-location")
@click.option("-q", "--query", required=True, help="A search query.")
@click.pass_obj
@reports_errors
def set_location(obj: CliContext, query):
    """Search and set your city."""
    api_key = obj.store.read_api_setting().key

    with OpenWeatherClient(api_key, obj.config) as client:
        cities = client.search_cities(query)
    if not cities:
        raise NoCitiesFoundError(query)

    show_cities(cities)
    saved = obj.store.update_user_settings(prompt_settings(cities))
    logger.info(f"Saved settings for {saved.city.name}")

    click.echo(f"\n{saved.city.name} is now your city!")
    click.echo(f"I'll use {saved.unit.display_name} for you.")


@cli.command("setup-api")
@click.option("-k", "--key", required=True, help="API key from OpenWeather.")
@click.pass_obj
@reports_errors
def setup_api(obj: CliContext, key):
    """Setup the OpenWeather API Key (https://openweathermap.org)."""
    obj.store.save_api_key(key)
    click.echo("Successfully updated your key!")


@cli.command()
def about():
    """View information about the program."""
    authors = ", ".join(a.strip() for a in PROGRAM_AUTHORS.split(","))
    click.echo(f"# {PROGRAM_NAME}")
    click.echo(f"{PROGRAM_DESCRIPTION}\n")
    click.echo(f"Developed by: {authors}")
    click.echo(f"- PyPI: {PYPI_URL}")
    click.echo(f"- Github: {REPOSITORY_URL}")


def main():
    cli()


if __name__ == "__main__":
    main()
