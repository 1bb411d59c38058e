from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import NamedTuple, Tuple

from ..errors import InvalidTimestamp, InvalidTimezone

# datetime.timezone only accepts offsets strictly inside one day
MAX_OFFSET_SECONDS = 86400


class EventKind(Enum):
  SUNRISE = "Sunrise"
  SUNSET = "Sunset"


@dataclass(frozen=True)
class LocalEvent:
  kind: EventKind
  instant: datetime

  def label(self) -> str:
    return self.instant.strftime(f"{self.kind.value}: %I:%M %p")

  def __str__(self) -> str:
    return self.label()


class EventPair(NamedTuple):
  next: LocalEvent
  following: LocalEvent

  def labels(self) -> Tuple[str, str]:
    return self.next.label(), self.following.label()


def fixed_offset(utc_offset_seconds: int) -> timezone:
  if not -MAX_OFFSET_SECONDS < utc_offset_seconds < MAX_OFFSET_SECONDS:
    raise InvalidTimezone(utc_offset_seconds)
  return timezone(timedelta(seconds=utc_offset_seconds))


def _to_local(ts: int, tz: timezone, event: str) -> datetime:
  try:
    return datetime.fromtimestamp(ts, tz=timezone.utc).astimezone(tz)
  except (OverflowError, OSError, ValueError) as exc:
    raise InvalidTimestamp(event, ts) from exc


def resolve_next_event(sunrise_ts: int, sunset_ts: int, utc_offset_seconds: int, now: datetime) -> EventPair:
  """
  Order today's sunrise/sunset by which one comes up next relative to `now`.

  Once the sunset has passed, the same (already past) sunrise is reported as
  next; the weather API only hands out one pair per day.
  """
  if now.tzinfo is None or now.utcoffset() is None:
    raise ValueError("now must be a timezone-aware datetime")
  tz = fixed_offset(utc_offset_seconds)
  sunrise = LocalEvent(EventKind.SUNRISE, _to_local(sunrise_ts, tz, "sunrise"))
  sunset = LocalEvent(EventKind.SUNSET, _to_local(sunset_ts, tz, "sunset"))
  current = now.astimezone(tz)

  if current < sunrise.instant:
    return EventPair(sunrise, sunset)
  if current < sunset.instant:
    return EventPair(sunset, sunrise)
  return EventPair(sunrise, sunset)
