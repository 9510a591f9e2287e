"""
Sample vocabulary used on first run.
"""

import calendar
from datetime import datetime, timedelta
from typing import List

from word_trainer.models import WordRecord, generate_word_id
from word_trainer.practice.scoring import derive_mastered


# (native, foreign, score, months ago, days ago)
SAMPLE_WORDS = [
    ("House", "Maison", 3, 2, 0),
    ("Apple", "Pomme", 5, 1, 0),
    ("Car", "Voiture", 1, 0, 10),
    ("Book", "Livre", 6, 3, 0),
    ("Water", "Eau", 0, 0, 0),
]


def months_before(moment: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping the day to the target month."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def sample_words(now: datetime = None) -> List[WordRecord]:
    """
    Build the starter word list.

    Args:
        now: Reference time for creation dates (defaults to the current time)

    Returns:
        List of WordRecord objects with mastered derived from their scores
    """
    now = now or datetime.now()
    words = []
    for native, foreign, score, months_ago, days_ago in SAMPLE_WORDS:
        created_at = months_before(now, months_ago) - timedelta(days=days_ago)
        words.append(WordRecord(
            id=generate_word_id(),
            native=native,
            foreign=foreign,
            score=score,
            created_at=created_at,
            mastered=derive_mastered(score)
        ))
    return words
