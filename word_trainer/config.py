"""
Configuration settings for the Word Trainer.
"""

import os
from pathlib import Path


class Config:
    """Configuration class for application settings."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent
    DATA_DIR = Path(os.environ.get("WORD_TRAINER_DATA_DIR", PROJECT_ROOT / "data"))

    # Storage files (inside DATA_DIR)
    WORDS_FILE = "words.json"
    SETTINGS_FILE = "settings.json"

    # Scoring settings
    MASTERY_THRESHOLD = 5  # score at which a new word starts out mastered

    # Daily goal settings
    DEFAULT_DAILY_TARGET = 10
    MIN_DAILY_TARGET = 1
    MAX_DAILY_TARGET = 100

    # Import settings
    MAX_IMPORT_SIZE = 5 * 1024 * 1024  # 5MB max CSV upload

    @classmethod
    def ensure_directories(cls, data_dir: Path = None):
        """Create necessary directories if they don't exist."""
        directory = Path(data_dir) if data_dir else cls.DATA_DIR
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    @classmethod
    def words_path(cls, data_dir: Path = None) -> Path:
        """Path of the JSON document holding all words."""
        return (Path(data_dir) if data_dir else cls.DATA_DIR) / cls.WORDS_FILE

    @classmethod
    def settings_path(cls, data_dir: Path = None) -> Path:
        """Path of the JSON document holding user settings."""
        return (Path(data_dir) if data_dir else cls.DATA_DIR) / cls.SETTINGS_FILE
