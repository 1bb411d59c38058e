from datetime import datetime, timedelta, timezone

import pytest

from weathercli.core.events import EventKind, resolve_next_event
from weathercli.errors import InvalidTimestamp, InvalidTimezone

from conftest import SUNRISE, SUNSET


def at(hour, minute=0):
  return datetime(2024, 6, 1, hour, minute, tzinfo=timezone.utc)


def kinds(pair):
  return pair.next.kind, pair.following.kind


def test_before_sunrise_sunrise_is_next():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(4))
  assert kinds(pair) == (EventKind.SUNRISE, EventKind.SUNSET)


def test_daytime_sunset_is_next():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(12))
  assert kinds(pair) == (EventKind.SUNSET, EventKind.SUNRISE)


def test_after_sunset_reports_same_sunrise_first():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(23))
  assert kinds(pair) == (EventKind.SUNRISE, EventKind.SUNSET)
  assert pair.next.instant == datetime.fromtimestamp(SUNRISE, tz=timezone.utc)


def test_exactly_at_sunset_counts_as_after():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(20, 9))
  assert kinds(pair) == (EventKind.SUNRISE, EventKind.SUNSET)


def test_exactly_at_sunrise_counts_as_daytime():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(6, 22))
  assert kinds(pair) == (EventKind.SUNSET, EventKind.SUNRISE)


def test_same_inputs_same_output():
  now = at(9, 30)
  assert resolve_next_event(SUNRISE, SUNSET, 3600, now) == resolve_next_event(SUNRISE, SUNSET, 3600, now)


def test_labels_in_utc():
  pair = resolve_next_event(SUNRISE, SUNSET, 0, at(1))
  assert pair.labels() == ("Sunrise: 06:22 AM", "Sunset: 08:09 PM")
  assert str(pair.next) == "Sunrise: 06:22 AM"


def test_labels_use_local_offset():
  # UTC+9: 06:22Z -> 15:22, 20:09Z -> 05:09 next day
  pair = resolve_next_event(SUNRISE, SUNSET, 9 * 3600, at(1))
  assert pair.labels() == ("Sunrise: 03:22 PM", "Sunset: 05:09 AM")
  assert pair.next.instant.utcoffset() == timedelta(hours=9)


def test_now_in_other_zone_is_compared_as_instant():
  # 14:00 in UTC+8 is 06:00Z, still before sunrise
  now = datetime(2024, 6, 1, 14, 0, tzinfo=timezone(timedelta(hours=8)))
  pair = resolve_next_event(SUNRISE, SUNSET, -5 * 3600, now)
  assert pair.next.kind is EventKind.SUNRISE


def test_offset_out_of_range():
  with pytest.raises(InvalidTimezone):
    resolve_next_event(SUNRISE, SUNSET, 90000, at(12))
  with pytest.raises(InvalidTimezone):
    resolve_next_event(SUNRISE, SUNSET, -86400, at(12))


def test_timestamp_out_of_range_names_event():
  with pytest.raises(InvalidTimestamp) as exc:
    resolve_next_event(SUNRISE, 10**20, 0, at(12))
  assert exc.value.event == "sunset"

  with pytest.raises(InvalidTimestamp) as exc:
    resolve_next_event(-(10**20), SUNSET, 0, at(12))
  assert exc.value.event == "sunrise"


def test_naive_now_rejected():
  with pytest.raises(ValueError):
    resolve_next_event(SUNRISE, SUNSET, 0, datetime(2024, 6, 1, 12))
