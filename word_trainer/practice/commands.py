"""
Commands applied to word snapshots by the practice and edit screens.

Each command turns a WordRecord into a new WordRecord (or an outcome) without
touching storage; ``execute`` loads the word from a store, applies the
command and writes the result back.
"""

import logging
import random
from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional, Tuple

from word_trainer.errors import InputValidationError, error_handler
from word_trainer.models import WordRecord, PracticeOutcome, OutcomeKind
from word_trainer.practice.scoring import evaluate_answer
from word_trainer.store.base import WordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PracticeAttemptCommand:
    """A single answer typed for a word."""
    answer: str
    now: Optional[datetime] = None

    def apply(self, record: WordRecord) -> Tuple[PracticeOutcome, WordRecord]:
        return evaluate_answer(record, self.answer, now=self.now)

    def execute(self, store: WordStore, word_id: str) -> Tuple[PracticeOutcome, WordRecord]:
        """
        Evaluate the answer and persist the updated word.

        A missing answer is reported as ``NEEDS_INPUT`` and nothing is written.
        """
        record = store.get(word_id)
        outcome, updated = self.apply(record)
        if outcome.kind is OutcomeKind.NEEDS_INPUT:
            return outcome, record

        stored = store.update(updated)
        logger.info(f"Practice '{stored.native}': {outcome.kind.value} (score {record.score} -> {stored.score})")
        return outcome, stored


@dataclass(frozen=True)
class EditCommand:
    """
    Changes made in the edit form.

    ``score`` and ``mastered`` are optional; when left as None the current
    values are kept. Setting ``mastered`` never changes the score.
    """
    native: str
    foreign: str
    score: Optional[int] = None
    mastered: Optional[bool] = None

    def apply(self, record: WordRecord) -> WordRecord:
        """
        Build the edited snapshot.

        Raises:
            InputValidationError: If native or foreign is empty after trimming,
                the score is not a whole number, or mastered is not a boolean
        """
        validation_error = error_handler.validate_word_fields(self.native, self.foreign)
        if validation_error:
            raise InputValidationError(validation_error)

        score = record.score
        if self.score is not None:
            score_error = error_handler.validate_score(self.score)
            if score_error:
                raise InputValidationError(score_error)
            score = max(0, int(self.score))

        mastered = record.mastered
        if self.mastered is not None:
            mastered_error = error_handler.validate_mastered(self.mastered)
            if mastered_error:
                raise InputValidationError(mastered_error)
            mastered = self.mastered

        return replace(
            record,
            native=self.native.strip(),
            foreign=self.foreign.strip(),
            score=score,
            mastered=mastered
        )

    def execute(self, store: WordStore, word_id: str) -> WordRecord:
        """Apply the edit to a stored word and persist it."""
        updated = self.apply(store.get(word_id))
        return store.update(updated)


def feedback_message(outcome: PracticeOutcome) -> str:
    """Text shown to the user after an answer is checked."""
    if outcome.kind is OutcomeKind.NEEDS_INPUT:
        return "Please type an answer"
    if outcome.kind is OutcomeKind.CORRECT:
        return "Correct"
    return f"Wrong - expected: {outcome.expected}"


def pick_random_word(words: List[WordRecord], rng: Optional[random.Random] = None) -> Optional[WordRecord]:
    """Choose a word to practice, or None if there are none."""
    if not words:
        return None
    return (rng or random).choice(words)
