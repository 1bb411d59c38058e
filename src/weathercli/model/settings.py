from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Unit(str, Enum):
  METRIC = "metric"
  IMPERIAL = "imperial"
  STANDARD = "standard"

  @property
  def display_name(self) -> str:
    return {"metric": "Celsius", "imperial": "Fahrenheit", "standard": "Kelvin"}[self.value]

  @property
  def wind_speed_unit(self) -> str:
    return "mph" if self is Unit.IMPERIAL else "m/s"


class City(BaseModel):
  name: str
  lat: float
  lon: float
  country: str = ""

  def __str__(self) -> str:
    return f"{self.name}, {self.country} (lat: {self.lat}, lon: {self.lon})"


class UserSettings(BaseModel):
  city: Optional[City] = None
  unit: Optional[Unit] = None
  display_emoji: Optional[bool] = None


class ApiSetting(BaseModel):
  key: Optional[str] = None
