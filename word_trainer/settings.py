"""
User preferences persisted between runs.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from word_trainer.config import Config
from word_trainer.errors import PersistenceError, error_handler
from word_trainer.models import WordFilter

logger = logging.getLogger(__name__)


def clamp_daily_target(value: int) -> int:
    """Keep the daily goal within the supported range."""
    return max(Config.MIN_DAILY_TARGET, min(Config.MAX_DAILY_TARGET, int(value)))


@dataclass
class UserSettings:
    """
    Preferences chosen in the options and settings screens.

    The daily target is a personal goal only; it does not affect scoring.
    """
    word_filter: WordFilter = WordFilter.ALL
    daily_target: int = Config.DEFAULT_DAILY_TARGET

    def __post_init__(self):
        self.daily_target = clamp_daily_target(self.daily_target)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word_filter': self.word_filter.value,
            'daily_target': self.daily_target
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserSettings':
        """Create instance from dictionary, falling back to defaults for bad values."""
        try:
            daily_target = int(data.get('daily_target', Config.DEFAULT_DAILY_TARGET))
        except (TypeError, ValueError):
            daily_target = Config.DEFAULT_DAILY_TARGET
        return cls(
            word_filter=WordFilter.parse(data.get('word_filter')),
            daily_target=daily_target
        )


class SettingsManager:
    """Loads and saves UserSettings as a small JSON document."""

    def __init__(self, path: Optional[str] = None):
        if path is None:
            path = Config.settings_path()
        self.path = Path(path)

    def load(self) -> UserSettings:
        """Read settings, returning defaults when the file is missing or unreadable."""
        if not self.path.exists():
            return UserSettings()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings document is not an object")
            return UserSettings.from_dict(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read settings {self.path}, using defaults: {e}")
            return UserSettings()

    def save(self, settings: UserSettings) -> None:
        """
        Write settings to disk.

        Raises:
            PersistenceError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=2)
        except OSError as e:
            processing_error = error_handler.handle_persistence_error(e, context={'path': str(self.path)})
            error_handler.add_error(processing_error)
            raise PersistenceError(processing_error) from e
