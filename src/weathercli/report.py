"""Plain-text weather report for the `check` command."""

from datetime import datetime

from .core.emoji import get_emoji
from .core.events import resolve_next_event
from .errors import SettingsIncompleteError
from .model.response import WeatherApiResponse
from .model.settings import UserSettings


def render_report(settings: UserSettings, weather: WeatherApiResponse, now: datetime) -> str:
    """Render the weather report shown by `weather-cli check`.

    Args:
        settings: Stored user settings; city and unit must be set
        weather: Current weather for the settings' city
        now: Current instant, used to order sunrise and sunset

    Returns:
        Multi-line report text

    Raises:
        SettingsIncompleteError: If city or unit is missing
        InvalidTimezone, InvalidTimestamp: If sunrise/sunset can't be resolved
    """
    city, unit = settings.city, settings.unit
    if city is None or unit is None:
        raise SettingsIncompleteError()

    # Resolve events first so a bad timestamp withholds the whole report
    upcoming, following = resolve_next_event(
        weather.sys.sunrise,
        weather.sys.sunset,
        weather.timezone,
        now,
    )

    condition = weather.weather[0]
    emoji = get_emoji(condition.icon or "") if settings.display_emoji else ""

    lines = [
        f"{city.name} ({city.country})",
        f"{weather.main.temp}° / {emoji}{condition.main} ({condition.description})",
        f"H: {weather.main.temp_max}°, L: {weather.main.temp_min}°",
        "",
        f"- Wind Speed: {weather.wind.speed} {unit.wind_speed_unit},",
        f"- Humidity: {weather.main.humidity} %,",
        f"- Pressure: {weather.main.pressure} hPa",
        f"- {upcoming}",
        f"  ({following})",
    ]
    return "\n".join(lines)
