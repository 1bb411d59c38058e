# OpenWeather response shapes.
# https://openweathermap.org/current
# https://openweathermap.org/api/geocoding-api
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Coord(BaseModel):
  lon: float
  lat: float


class Weather(BaseModel):
  id: Optional[int] = None
  main: str
  description: str
  icon: Optional[str] = None


class Main(BaseModel):
  temp: float
  feels_like: Optional[float] = None
  pressure: int
  humidity: int
  temp_min: float
  temp_max: float
  sea_level: Optional[int] = None
  grnd_level: Optional[int] = None


class Wind(BaseModel):
  speed: float
  deg: Optional[int] = None
  gust: Optional[float] = None


class Precipitation(BaseModel):
  one_h: Optional[float] = Field(default=None, alias="1h")
  three_h: Optional[float] = Field(default=None, alias="3h")


class Clouds(BaseModel):
  all: Optional[int] = None


class Sys(BaseModel):
  type: Optional[int] = None
  id: Optional[int] = None
  country: Optional[str] = None
  sunrise: int
  sunset: int


class WeatherApiResponse(BaseModel):
  coord: Coord
  weather: List[Weather] = Field(min_length=1)
  base: Optional[str] = None
  main: Main
  visibility: Optional[int] = None
  wind: Wind
  rain: Optional[Precipitation] = None
  snow: Optional[Precipitation] = None
  clouds: Optional[Clouds] = None
  dt: Optional[int] = None
  sys: Sys
  timezone: int
  name: Optional[str] = None


class GeocodingResult(BaseModel):
  name: str
  local_names: Optional[Dict[str, str]] = None
  lat: float
  lon: float
  country: str = ""
  state: Optional[str] = None
