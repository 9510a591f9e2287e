"""
Word store persisted as a single JSON document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from word_trainer.config import Config
from word_trainer.errors import PersistenceError, error_handler
from word_trainer.models import WordRecord
from word_trainer.store.memory_store import InMemoryWordStore
from word_trainer.store.samples import sample_words

logger = logging.getLogger(__name__)


class JsonWordStore(InMemoryWordStore):
    """
    Keeps the whole collection in memory and rewrites the JSON document
    on every committed change.
    """

    def __init__(self, path: Optional[str] = None, seed_samples: bool = True):
        """
        Initialize the JsonWordStore.

        Args:
            path: Location of the JSON document. If None, defaults to
                  words.json inside the configured data directory.
            seed_samples: Start from the sample vocabulary when the document
                          is missing or unreadable
        """
        if path is None:
            path = Config.words_path()
        self.path = Path(path).resolve()
        self.seed_samples = seed_samples
        super().__init__(self._load())

    def _load(self) -> List[WordRecord]:
        """
        Load words from disk.

        Returns:
            The stored words, or the sample words (or an empty list) when
            the document is missing or cannot be decoded
        """
        if not self.path.exists():
            logger.info(f"No word file at {self.path}, starting fresh")
            return sample_words() if self.seed_samples else []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return [WordRecord.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Could not read word file {self.path}: {e}")
            return sample_words() if self.seed_samples else []

    def _commit(self, words: List[WordRecord]) -> None:
        """Write ``words`` to disk atomically, then make them current."""
        self._save(words)
        super()._commit(words)

    def save(self) -> None:
        """Write the current collection to disk."""
        self._save(self._words)

    def _save(self, words: List[WordRecord]) -> None:
        payload = json.dumps([word.to_dict() for word in words], indent=2, ensure_ascii=False)
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix='.words_', suffix='.json'
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.replace(temp_path, self.path)
            temp_path = None
            logger.debug(f"Saved {len(words)} word(s) to {self.path}")
        except OSError as e:
            processing_error = error_handler.handle_persistence_error(
                e, context={'path': str(self.path), 'word_count': len(words)}
            )
            error_handler.add_error(processing_error)
            raise PersistenceError(processing_error) from e
        finally:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
