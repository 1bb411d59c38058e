ICON_EMOJI = {
  "01d": "☀️", "02d": "⛅️", "03d": "☁️", "04d": "☁️",
  "09d": "🌧️", "10d": "🌦️", "11d": "⛈️", "13d": "❄️", "50d": "🌨️",
  "01n": "🌑", "02n": "🌑☁️", "03n": "☁️", "04n": "☁️☁️",
  "09n": "🌧️", "10n": "☔️", "11n": "⛈️", "13n": "❄️", "50n": "🌨️",
}


def get_emoji(icon_id: str) -> str:
  """
  Emoji for an OpenWeather icon id, with a trailing space so it can prefix text.
  Unknown ids give an empty string.
  """
  emoji = ICON_EMOJI.get(icon_id)
  return f"{emoji} " if emoji else ""
