from datetime import datetime, timezone

import pytest


def epoch(*args) -> int:
  return int(datetime(*args, tzinfo=timezone.utc).timestamp())


SUNRISE = epoch(2024, 6, 1, 6, 22)
SUNSET = epoch(2024, 6, 1, 20, 9)


@pytest.fixture
def weather_payload():
  return {
    "coord": {"lon": -0.1278, "lat": 51.5074},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
      "temp": 18.4, "feels_like": 17.9, "pressure": 1015, "humidity": 55,
      "temp_min": 15.2, "temp_max": 21.0,
    },
    "visibility": 10000,
    "wind": {"speed": 3.6, "deg": 240},
    "rain": {"1h": 0.2},
    "clouds": {"all": 0},
    "dt": SUNRISE + 3600,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": SUNRISE, "sunset": SUNSET},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
  }


@pytest.fixture
def geocoding_payload():
  return [
    {"name": "London", "lat": 51.5073219, "lon": -0.1276474, "country": "GB", "state": "England"},
    {"name": "London", "lat": 42.9832406, "lon": -81.243372, "country": "CA", "state": "Ontario"},
  ]
