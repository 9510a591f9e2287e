"""
In-memory word store.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, List, Optional

from word_trainer.errors import InputValidationError, WordNotFoundError, error_handler
from word_trainer.models import WordRecord, generate_word_id
from word_trainer.practice.scoring import derive_mastered
from word_trainer.store.base import WordStore

logger = logging.getLogger(__name__)


def _check_fields(native: str, foreign: str) -> None:
    validation_error = error_handler.validate_word_fields(native, foreign)
    if validation_error:
        raise InputValidationError(validation_error)


class InMemoryWordStore(WordStore):
    """
    Word store kept in a list, newest word first.

    Subclasses persist the collection by overriding ``_commit``.
    """

    def __init__(self, words: Optional[Iterable[WordRecord]] = None):
        self._words: List[WordRecord] = list(words or [])

    def _commit(self, words: List[WordRecord]) -> None:
        """Make ``words`` the current collection."""
        self._words = words

    def all_words(self) -> List[WordRecord]:
        return list(self._words)

    def create(
        self,
        native: str,
        foreign: str,
        score: int = 0,
        mastered: Optional[bool] = None,
        created_at: Optional[datetime] = None
    ) -> WordRecord:
        _check_fields(native, foreign)
        score = max(0, int(score))

        record = WordRecord(
            id=generate_word_id(),
            native=native.strip(),
            foreign=foreign.strip(),
            score=score,
            created_at=created_at or datetime.now(),
            last_correct_at=None,
            mastered=derive_mastered(score, mastered)
        )

        self._commit([record] + self._words)
        logger.debug(f"Created word {record.id} ({record.native} / {record.foreign})")
        return record

    def update(self, record: WordRecord) -> WordRecord:
        _check_fields(record.native, record.foreign)

        for index, existing in enumerate(self._words):
            if existing.id != record.id:
                continue

            # created_at never changes after creation
            stored = replace(
                record,
                native=record.native.strip(),
                foreign=record.foreign.strip(),
                score=max(0, int(record.score)),
                created_at=existing.created_at
            )
            words = list(self._words)
            words[index] = stored
            self._commit(words)
            logger.debug(f"Updated word {stored.id} (score={stored.score}, mastered={stored.mastered})")
            return stored

        raise WordNotFoundError(error_handler.word_not_found(record.id))

    def delete(self, word_ids: Iterable[str]) -> int:
        ids = set(word_ids)
        known = {word.id for word in self._words}

        missing = sorted(ids - known)
        if missing:
            raise WordNotFoundError(error_handler.word_not_found(missing[0]))

        remaining = [word for word in self._words if word.id not in ids]
        removed = len(self._words) - len(remaining)
        if removed:
            self._commit(remaining)
        logger.info(f"Deleted {removed} word(s)")
        return removed
