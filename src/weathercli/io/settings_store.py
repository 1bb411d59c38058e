"""JSON settings files stored in the weather-cli settings directory."""

from pathlib import Path
from typing import Type, TypeVar, Union
import json
import logging
import re

from pydantic import BaseModel, ValidationError

from ..errors import InvalidApiKeyError, MissingApiKeyError, SettingsReadError, SettingsWriteError
from ..model.settings import ApiSetting, UserSettings

logger = logging.getLogger(__name__)

API_JSON_NAME = "api"
SETTINGS_JSON_NAME = "settings"

API_KEY_PATTERN = re.compile(r"[a-zA-Z0-9]{32}")

M = TypeVar("M", bound=BaseModel)


class SettingsStore:
    """Reads and writes the API key file and the user settings file."""

    def __init__(self, directory: Union[str, Path]):
        """Initialize settings store.

        Args:
            directory: Directory the JSON files live in (created on demand)
        """
        self.directory = Path(directory)

    def json_path(self, name: str) -> Path:
        return self.directory / f"weather-cli-{name}.json"

    def get_json_file(self, name: str) -> Path:
        """Return the path of a settings file, creating an empty one if needed.

        Args:
            name: Short file name, e.g. "api" or "settings"

        Returns:
            Path to the existing JSON file
        """
        path = self.json_path(name)
        if not path.exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text("{}", encoding="utf-8")
            logger.debug(f"Created empty settings file {path}")
        return path

    def _read(self, name: str, model: Type[M]) -> M:
        try:
            path = self.get_json_file(name)
            data = json.loads(path.read_text(encoding="utf-8"))
            return model.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.debug(f"Could not read {self.json_path(name)}: {e}")
            raise SettingsReadError(name) from e

    def _write(self, name: str, model: BaseModel) -> None:
        try:
            path = self.get_json_file(name)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(model.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise SettingsWriteError(name, e) from e
        logger.debug(f"Wrote {path}")

    def read_api_setting(self) -> ApiSetting:
        """Read the stored API key.

        Raises:
            MissingApiKeyError: If no key has been saved yet
        """
        setting = self._read(API_JSON_NAME, ApiSetting)
        if not setting.key:
            raise MissingApiKeyError()
        return setting

    def read_user_settings(self) -> UserSettings:
        return self._read(SETTINGS_JSON_NAME, UserSettings)

    def save_api_key(self, key: str) -> None:
        """Validate and store an OpenWeather API key.

        Args:
            key: 32 character alphanumeric key

        Raises:
            InvalidApiKeyError: If the key has the wrong shape
        """
        if not API_KEY_PATTERN.fullmatch(key):
            raise InvalidApiKeyError("Please enter a valid key!")
        self._write(API_JSON_NAME, ApiSetting(key=key))

    def update_user_settings(self, new: UserSettings) -> UserSettings:
        """Merge new settings into the stored ones and write them back.

        The city is always replaced; unit and emoji preference only when given.

        Args:
            new: Settings to apply

        Returns:
            The settings as written to disk
        """
        current = self.read_user_settings()
        current.city = new.city
        if new.unit is not None:
            current.unit = new.unit
        if new.display_emoji is not None:
            current.display_emoji = new.display_emoji
        self._write(SETTINGS_JSON_NAME, current)
        return current
