"""Exception hierarchy for weather-cli.

Every error the CLI reports to the user derives from WeatherCliError; the
message of the exception is what gets printed after "ERROR:".
"""


class WeatherCliError(Exception):
    """Base class for user-facing failures."""


class ConfigError(WeatherCliError):
    """The application config file could not be loaded."""


class SettingsReadError(WeatherCliError):
    """A settings JSON file exists but could not be parsed."""

    def __init__(self, name: str):
        super().__init__(f"Failed to read the following file: {name}")
        self.name = name


class SettingsWriteError(WeatherCliError):
    def __init__(self, name: str, reason: OSError):
        super().__init__(f"Failed to write the following file: {name} ({reason.strerror or reason})")
        self.name = name


class SettingsIncompleteError(WeatherCliError):
    """City or unit has not been chosen yet."""

    def __init__(self):
        super().__init__(
            "Failed to read the setting! Please run 'set-location' command "
            "to set your city and preferred unit."
        )


class MissingApiKeyError(WeatherCliError):
    def __init__(self):
        super().__init__("Couldn't get the API key! Make sure you set your key.")


class InvalidApiKeyError(WeatherCliError):
    """Raised for a malformed key locally, or a key rejected by the API."""


class ApiRequestError(WeatherCliError):
    """The HTTP request failed or returned an error status."""


class ResponseFormatError(WeatherCliError):
    def __init__(self, model_name: str):
        super().__init__(f"The given '{model_name}' JSON input may be invalid.")
        self.model_name = model_name


class NoCitiesFoundError(WeatherCliError):
    def __init__(self, query: str):
        super().__init__(f"Couldn't find any city matching '{query}'.")
        self.query = query


class InvalidTimezone(WeatherCliError):
    def __init__(self, offset: int):
        super().__init__(f"Failed to read timezone: offset {offset}s is out of range.")
        self.offset = offset


class InvalidTimestamp(WeatherCliError):
    """An epoch timestamp could not be turned into a datetime.

    `event` is "sunrise" or "sunset".
    """

    def __init__(self, event: str, timestamp: int):
        super().__init__(f"Failed to read {event} time: {timestamp}")
        self.event = event
        self.timestamp = timestamp
