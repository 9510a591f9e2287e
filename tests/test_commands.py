"""
Tests for practice and edit commands.
"""

import random
import pytest
from datetime import datetime

from word_trainer.errors import InputValidationError, WordNotFoundError
from word_trainer.models import OutcomeKind, PracticeOutcome
from word_trainer.practice import (
    PracticeAttemptCommand,
    EditCommand,
    feedback_message,
    pick_random_word
)
from word_trainer.store import InMemoryWordStore


NOW = datetime(2026, 3, 5, 12, 0)


@pytest.fixture
def store(house):
    return InMemoryWordStore([house])


class TestPracticeAttemptCommand:
    """Test persisted practice attempts."""

    def test_correct_answer_is_stored(self, store, house):
        outcome, stored = PracticeAttemptCommand("maison", now=NOW).execute(store, house.id)

        assert outcome.kind is OutcomeKind.CORRECT
        assert stored.score == 4
        assert store.get(house.id).score == 4
        assert store.get(house.id).last_correct_at == NOW

    def test_wrong_answer_is_stored(self, store, house):
        outcome, stored = PracticeAttemptCommand("voiture", now=NOW).execute(store, house.id)

        assert outcome.expected == "Maison"
        assert store.get(house.id).score == 2
        assert stored.last_correct_at is None

    def test_empty_answer_writes_nothing(self, house):
        """Test that NEEDS_INPUT never reaches the store."""
        class RecordingStore(InMemoryWordStore):
            def __init__(self, words):
                super().__init__(words)
                self.commits = 0

            def _commit(self, words):
                self.commits += 1
                super()._commit(words)

        store = RecordingStore([house])
        outcome, record = PracticeAttemptCommand("   ").execute(store, house.id)

        assert outcome.kind is OutcomeKind.NEEDS_INPUT
        assert record == house
        assert store.commits == 0

    def test_unknown_word(self, store):
        with pytest.raises(WordNotFoundError):
            PracticeAttemptCommand("maison").execute(store, "missing")

    def test_apply_does_not_touch_store(self, store, house):
        outcome, updated = PracticeAttemptCommand("Maison", now=NOW).apply(house)
        assert updated.score == 4
        assert store.get(house.id).score == 3


class TestEditCommand:
    """Test the edit form command."""

    def test_edit_words_keeps_score(self, store, house):
        """Test that leaving the score out keeps the current one."""
        stored = EditCommand(" Home ", "Domicile").execute(store, house.id)

        assert stored.native == "Home"
        assert stored.foreign == "Domicile"
        assert stored.score == 3
        assert stored.mastered is False

    def test_edit_score_does_not_derive_mastered(self, house):
        """Test that raising the score past the threshold keeps the flag."""
        updated = EditCommand("House", "Maison", score=8).apply(house)
        assert updated.score == 8
        assert updated.mastered is False

    def test_edit_score_from_text(self, house):
        assert EditCommand("House", "Maison", score="7").apply(house).score == 7

    def test_negative_score_clamped(self, house):
        assert EditCommand("House", "Maison", score=-4).apply(house).score == 0

    def test_mastered_toggle_leaves_score(self, house):
        """Test marking a word as mastered."""
        updated = EditCommand("House", "Maison", mastered=True).apply(house)
        assert updated.mastered is True
        assert updated.score == house.score

    @pytest.mark.parametrize("mastered", ["false", "yes", 1])
    def test_mastered_must_be_boolean(self, house, mastered):
        """Test that a truthy non-boolean is not taken as mastered."""
        with pytest.raises(InputValidationError) as exc_info:
            EditCommand("House", "Maison", mastered=mastered).apply(house)
        assert exc_info.value.processing_error.error_code == "INPUT_003"

    def test_clear_mastered(self, house):
        word = EditCommand("House", "Maison", mastered=True).apply(house)
        assert EditCommand("House", "Maison", mastered=False).apply(word).mastered is False

    @pytest.mark.parametrize("score", ["abc", True, 1.5j])
    def test_invalid_score(self, house, score):
        with pytest.raises(InputValidationError) as exc_info:
            EditCommand("House", "Maison", score=score).apply(house)
        assert exc_info.value.processing_error.error_code == "INPUT_002"

    def test_empty_field_rejected(self, store, house):
        """Test that a blank side is rejected before anything is stored."""
        with pytest.raises(InputValidationError) as exc_info:
            EditCommand("House", "  ").execute(store, house.id)

        assert exc_info.value.processing_error.context['fields'] == ["foreign"]
        assert store.get(house.id).foreign == "Maison"

    def test_edit_unknown_word(self, store):
        with pytest.raises(WordNotFoundError):
            EditCommand("a", "b").execute(store, "missing")


class TestFeedbackMessage:
    """Test the text shown after an answer."""

    def test_messages(self):
        assert feedback_message(PracticeOutcome(OutcomeKind.NEEDS_INPUT)) == "Please type an answer"
        assert feedback_message(PracticeOutcome(OutcomeKind.CORRECT)) == "Correct"
        assert feedback_message(PracticeOutcome(OutcomeKind.INCORRECT, "Maison")) == "Wrong - expected: Maison"


class TestPickRandomWord:
    """Test random word selection."""

    def test_no_words(self):
        assert pick_random_word([]) is None

    def test_single_word(self, house):
        assert pick_random_word([house]) is house

    def test_seeded_choice_is_repeatable(self, store):
        words = [store.create(f"word{i}", f"mot{i}") for i in range(10)]

        first = pick_random_word(words, random.Random(42))
        second = pick_random_word(words, random.Random(42))

        assert first is second
        assert first in words
