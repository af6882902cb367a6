"""Editor settings sources."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DictConfigurationSource:
    """Settings held in memory.

    Implements ConfigurationSource protocol.
    """

    def __init__(self, settings: dict[str, Any] | None = None):
        self._settings = dict(settings or {})

    def get(self, key: str) -> str | None:
        value = self._settings.get(key)
        return value if isinstance(value, str) else None


class JsonSettingsSource(DictConfigurationSource):
    """Settings read once from an editor ``settings.json`` file.

    A missing or invalid file yields empty settings and logs a warning.
    """

    def __init__(self, settings_path: Path):
        """Initialize by loading the settings file.

        Args:
            settings_path: Path to settings.json
        """
        self._path = settings_path
        super().__init__(self._load())

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            logger.warning(f"Settings file not found: {self._path}")
            return {}

        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Invalid settings file {self._path}, ignoring it: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Settings file {self._path} is not a JSON object, ignoring it")
            return {}
        return data
