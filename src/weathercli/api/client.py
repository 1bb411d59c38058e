"""HTTP client for the OpenWeather geocoding and current weather APIs."""

from typing import Any, Dict, List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel, ValidationError

from ..config import AppConfig
from ..errors import ApiRequestError, InvalidApiKeyError, ResponseFormatError
from ..model.response import GeocodingResult, WeatherApiResponse
from ..model.settings import City, Unit

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class OpenWeatherClient:
    """Thin synchronous wrapper over the two OpenWeather endpoints we use."""

    def __init__(
        self,
        api_key: str,
        config: Optional[AppConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the client.

        Args:
            api_key: OpenWeather API key
            config: Endpoints and timeout (default: AppConfig())
            http_client: Pre-built httpx client, e.g. with a mock transport.
                The caller keeps ownership of an injected client.
        """
        self.api_key = api_key
        self.config = config or AppConfig()
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=self.config.timeout)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> "OpenWeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, url: str, params: Dict[str, Any]) -> Any:
        shown = {k: v for k, v in params.items() if k != "appid"}
        logger.debug(f"GET {url} params={shown}")
        try:
            resp = self._http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise ApiRequestError(f"Failed to reach {url}: {e}") from e

        if resp.status_code == 401:
            raise InvalidApiKeyError("API Key is invalid. Please try again.")

        try:
            data = resp.json()
        except ValueError:
            data = None

        # The API also reports errors in the body's "cod" field
        if isinstance(data, dict) and str(data.get("cod")) == "401":
            raise InvalidApiKeyError("API Key is invalid. Please try again.")

        if resp.is_error:
            message = data.get("message") if isinstance(data, dict) else resp.reason_phrase
            logger.warning(f"{url} returned {resp.status_code}: {message}")
            raise ApiRequestError(f"OpenWeather returned {resp.status_code}: {message}")

        if data is None:
            raise ApiRequestError(f"OpenWeather returned a non-JSON body from {url}")
        return data

    @staticmethod
    def _parse(model: Type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.debug(f"{model.__name__} validation failed: {e}")
            raise ResponseFormatError(model.__name__) from e

    def search_cities(self, query: str) -> List[City]:
        """Look up cities matching a free-text query.

        Args:
            query: City name, optionally with state and country code

        Returns:
            Matching cities in the order the API ranks them
        """
        data = self._get_json(
            self.config.geocoding_url,
            {"q": query, "limit": self.config.geocoding_limit, "appid": self.api_key},
        )
        if not isinstance(data, list):
            raise ResponseFormatError("GeocodingResult")
        results = [self._parse(GeocodingResult, item) for item in data]

        logger.info(f"Found {len(results)} cities for {query!r}")
        return [City(name=r.name, lat=r.lat, lon=r.lon, country=r.country) for r in results]

    def current_weather(self, city: City, unit: Unit) -> WeatherApiResponse:
        """Fetch the current weather at a city's coordinates.

        Args:
            city: City with coordinates
            unit: Measurement system for temperatures and wind speed

        Returns:
            The parsed weather response
        """
        data = self._get_json(
            self.config.weather_url,
            {"lat": city.lat, "lon": city.lon, "appid": self.api_key, "units": unit.value},
        )
        return self._parse(WeatherApiResponse, data)
