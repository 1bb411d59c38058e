"""API clients for weather-cli."""

from .client import OpenWeatherClient

__all__ = [
    "OpenWeatherClient",
]
