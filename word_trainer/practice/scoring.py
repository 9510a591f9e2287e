"""
Scoring rules for practice attempts.

A correct answer adds one point and stamps ``last_correct_at``; a wrong
answer removes one point, never going below zero. The mastered flag is only
derived when a word is built and is left alone by practice.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional, Tuple

from word_trainer.config import Config
from word_trainer.models import WordRecord, PracticeOutcome, OutcomeKind


def derive_mastered(score: int, explicit_mastered: Optional[bool] = None) -> bool:
    """
    Decide the mastered flag of a word being constructed.

    Args:
        score: Initial score of the word
        explicit_mastered: Flag supplied by the caller, if any

    Returns:
        ``explicit_mastered`` when given, otherwise whether the score
        reached the mastery threshold

    Examples:
        >>> derive_mastered(5)
        True
        >>> derive_mastered(4)
        False
        >>> derive_mastered(0, True)
        True
    """
    if explicit_mastered is not None:
        return bool(explicit_mastered)
    return score >= Config.MASTERY_THRESHOLD


def normalize_answer(text: Optional[str]) -> str:
    """Trim surrounding whitespace and newlines."""
    return (text or "").strip()


def answers_match(answer: str, expected: str) -> bool:
    """Compare two answers ignoring case and surrounding whitespace."""
    return normalize_answer(answer).casefold() == normalize_answer(expected).casefold()


def evaluate_answer(
    record: WordRecord,
    raw_answer: Optional[str],
    now: Optional[datetime] = None
) -> Tuple[PracticeOutcome, WordRecord]:
    """
    Judge a practice answer and compute the updated word.

    The caller is responsible for persisting the returned record.

    Args:
        record: Word being practiced
        raw_answer: Text typed by the user, possibly empty
        now: Time of the attempt (defaults to the current time)

    Returns:
        Tuple of (outcome, updated record). For ``NEEDS_INPUT`` the
        record is returned unchanged.
    """
    if not normalize_answer(raw_answer):
        return PracticeOutcome(OutcomeKind.NEEDS_INPUT), record

    if answers_match(raw_answer, record.foreign):
        updated = replace(
            record,
            score=record.score + 1,
            last_correct_at=now or datetime.now()
        )
        return PracticeOutcome(OutcomeKind.CORRECT), updated

    updated = replace(record, score=max(0, record.score - 1))
    return PracticeOutcome(OutcomeKind.INCORRECT, expected=record.foreign), updated
