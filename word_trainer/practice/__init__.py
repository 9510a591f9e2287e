"""
Practice module: scoring rules and the commands built on them.
"""

from word_trainer.practice.scoring import (
    derive_mastered,
    answers_match,
    evaluate_answer
)
from word_trainer.practice.commands import (
    PracticeAttemptCommand,
    EditCommand,
    feedback_message,
    pick_random_word
)

__all__ = [
    'derive_mastered',
    'answers_match',
    'evaluate_answer',
    'PracticeAttemptCommand',
    'EditCommand',
    'feedback_message',
    'pick_random_word'
]
