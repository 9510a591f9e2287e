"""
User-facing confirmation texts.
"""

from typing import Sequence

from word_trainer.models import WordRecord


def delete_confirmation_message(words: Sequence[WordRecord]) -> str:
    """
    Build the question asked before deleting words.

    A single word is named; several words are counted.
    """
    if not words:
        raise ValueError("No words selected for deletion")

    if len(words) == 1:
        return f"Are you sure you want to delete ‘{words[0].native}’? This cannot be undone."
    return f"Are you sure you want to delete {len(words)} words? This cannot be undone."
