"""
Tests for core data models.
"""

import dataclasses
import json
import pytest
from datetime import datetime

from word_trainer.models import (
    WordRecord,
    WordFilter,
    PracticeOutcome,
    OutcomeKind,
    ImportResult,
    generate_word_id
)


class TestWordRecord:
    """Test cases for WordRecord data model."""

    def test_word_record_defaults(self):
        """Test a record built with only the required fields."""
        record = WordRecord(id="abc", native="Car", foreign="Voiture")
        assert record.score == 0
        assert record.last_correct_at is None
        assert record.mastered is False
        assert isinstance(record.created_at, datetime)

    def test_word_record_is_immutable(self, house):
        """Test that snapshots cannot be changed in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            house.score = 10

    def test_to_dict_round_trip(self, house):
        """Test conversion to and from a dictionary."""
        updated = dataclasses.replace(house, last_correct_at=datetime(2026, 2, 1, 8, 0))
        data = updated.to_dict()

        assert data['created_at'] == "2026-01-10T09:30:00"
        assert data['last_correct_at'] == "2026-02-01T08:00:00"
        assert WordRecord.from_dict(data) == updated

    def test_to_json_is_valid_json(self, house):
        """Test JSON serialization."""
        data = json.loads(house.to_json())
        assert data['native'] == "House"
        assert data['last_correct_at'] is None
        assert WordRecord.from_json(house.to_json()) == house

    def test_from_dict_generates_missing_id(self):
        """Test that records without an id get a fresh one."""
        record = WordRecord.from_dict({
            'native': "Water",
            'foreign': "Eau",
            'score': 0,
            'created_at': "2026-01-01T00:00:00"
        })
        assert record.id
        assert len(record.id) == 36

    def test_from_dict_derives_missing_mastered(self):
        """Test that a missing mastered flag follows the score threshold."""
        base = {'native': "Book", 'foreign': "Livre", 'created_at': "2026-01-01T00:00:00"}

        assert WordRecord.from_dict({**base, 'score': 6}).mastered is True
        assert WordRecord.from_dict({**base, 'score': 4}).mastered is False

    def test_from_dict_keeps_explicit_mastered(self):
        """Test that a stored mastered flag wins over the score."""
        record = WordRecord.from_dict({
            'native': "Book",
            'foreign': "Livre",
            'score': 9,
            'created_at': "2026-01-01T00:00:00",
            'mastered': False
        })
        assert record.mastered is False

    def test_generate_word_id_unique(self):
        """Test that generated ids do not repeat."""
        ids = {generate_word_id() for _ in range(100)}
        assert len(ids) == 100


class TestWordFilter:
    """Test cases for WordFilter."""

    def test_matches(self, house):
        """Test which words each filter shows."""
        mastered = dataclasses.replace(house, mastered=True)

        assert WordFilter.ALL.matches(house)
        assert WordFilter.ALL.matches(mastered)
        assert WordFilter.TO_PRACTICE.matches(house)
        assert not WordFilter.TO_PRACTICE.matches(mastered)
        assert WordFilter.MASTERED.matches(mastered)
        assert not WordFilter.MASTERED.matches(house)

    @pytest.mark.parametrize("value,expected", [
        ("all", WordFilter.ALL),
        ("to_practice", WordFilter.TO_PRACTICE),
        ("To Practice", WordFilter.TO_PRACTICE),
        ("to-practice", WordFilter.TO_PRACTICE),
        ("Mastered", WordFilter.MASTERED),
    ])
    def test_parse(self, value, expected):
        """Test parsing filter names and display values."""
        assert WordFilter.parse(value) is expected

    def test_parse_unknown_uses_default(self):
        """Test fallback for unknown or empty values."""
        assert WordFilter.parse("bogus") is WordFilter.ALL
        assert WordFilter.parse(None, default=WordFilter.MASTERED) is WordFilter.MASTERED


class TestPracticeOutcome:
    """Test cases for PracticeOutcome."""

    def test_correct_outcome(self):
        outcome = PracticeOutcome(OutcomeKind.CORRECT)
        assert outcome.is_correct
        assert outcome.to_dict() == {'kind': 'correct', 'expected': None}

    def test_incorrect_outcome_carries_expected(self):
        outcome = PracticeOutcome(OutcomeKind.INCORRECT, expected="Maison")
        assert not outcome.is_correct
        assert outcome.to_dict() == {'kind': 'incorrect', 'expected': 'Maison'}


class TestImportResult:
    """Test cases for ImportResult."""

    def test_import_result_counts_records(self, house):
        result = ImportResult(records=[house], success=True)
        assert result.imported == 1
        data = result.to_dict()
        assert data['imported'] == 1
        assert data['words'][0]['native'] == "House"
