import pytest

from weathercli.core.emoji import get_emoji


@pytest.mark.parametrize("icon, expected", [
  ("01d", "☀️ "),
  ("02n", "🌑☁️ "),
  ("04n", "☁️☁️ "),
  ("10n", "☔️ "),
  ("13d", "❄️ "),
])
def test_known_icons(icon, expected):
  assert get_emoji(icon) == expected


def test_unknown_icon_is_empty():
  assert get_emoji("random_string") == ""
  assert get_emoji("") == ""
