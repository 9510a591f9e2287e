"""
Progress statistics for the charts screen.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from word_trainer.models import WordRecord


@dataclass
class WordStats:
    """Summary of the word collection."""
    total: int
    mastered: int
    to_learn: int
    average_score: float
    learned_per_month: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'total': self.total,
            'mastered': self.mastered,
            'to_learn': self.to_learn,
            'average_score': self.average_score,
            'learned_per_month': [
                {'month': month, 'count': count}
                for month, count in self.learned_per_month.items()
            ]
        }


def activity_month(word: WordRecord) -> str:
    """Month ("YYYY-MM") a word counts towards: last correct answer, else creation."""
    return (word.last_correct_at or word.created_at).strftime('%Y-%m')


def summarize(words: List[WordRecord]) -> WordStats:
    """
    Compute summary counts and the per-month activity histogram.

    Args:
        words: Words to summarize

    Returns:
        WordStats with months sorted oldest first
    """
    if not words:
        return WordStats(total=0, mastered=0, to_learn=0, average_score=0.0)

    mastered_flags = np.array([word.mastered for word in words], dtype=bool)
    scores = np.array([word.score for word in words], dtype=np.int64)
    months, counts = np.unique(
        np.array([activity_month(word) for word in words]),
        return_counts=True
    )

    mastered = int(np.count_nonzero(mastered_flags))
    return WordStats(
        total=len(words),
        mastered=mastered,
        to_learn=len(words) - mastered,
        average_score=round(float(scores.mean()), 2),
        learned_per_month={str(month): int(count) for month, count in zip(months, counts)}
    )
