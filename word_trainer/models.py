"""
Core data models for the Word Trainer.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
import json
import uuid


def generate_word_id() -> str:
    """
    Generate a unique word ID.

    Returns:
        A unique word identifier string
    """
    return str(uuid.uuid4())


class WordFilter(Enum):
    """Views of the word collection offered to the user."""
    ALL = "All"
    TO_PRACTICE = "To Practice"
    MASTERED = "Mastered"

    def matches(self, word: 'WordRecord') -> bool:
        """Check whether a word belongs to this view."""
        if self is WordFilter.TO_PRACTICE:
            return not word.mastered
        if self is WordFilter.MASTERED:
            return word.mastered
        return True

    @classmethod
    def parse(cls, value: Optional[str], default: 'WordFilter' = None) -> 'WordFilter':
        """
        Look up a filter by value ("To Practice") or name ("to_practice").

        Unknown or empty values return ``default`` (``ALL`` when not given).
        """
        if default is None:
            default = cls.ALL
        if not value:
            return default
        normalized = value.strip().lower().replace('-', '_').replace(' ', '_')
        for word_filter in cls:
            if normalized in (word_filter.name.lower(), word_filter.value.lower().replace(' ', '_')):
                return word_filter
        return default


@dataclass(frozen=True)
class WordRecord:
    """A native/foreign word pair with its practice score and mastery state."""
    id: str
    native: str
    foreign: str
    score: int = 0
    created_at: datetime = field(default_factory=datetime.now)
    last_correct_at: Optional[datetime] = None
    mastered: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data['created_at'] = self.created_at.isoformat()
        data['last_correct_at'] = (
            self.last_correct_at.isoformat() if self.last_correct_at else None
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WordRecord':
        """
        Create instance from dictionary.

        A missing ``id`` gets a fresh one and a missing ``mastered`` flag is
        derived from the score, the same way a newly added word is built.
        """
        from word_trainer.practice.scoring import derive_mastered

        score = max(0, int(data['score']))
        last_correct_at = data.get('last_correct_at')
        return cls(
            id=data.get('id') or generate_word_id(),
            native=data['native'],
            foreign=data['foreign'],
            score=score,
            created_at=datetime.fromisoformat(data['created_at']),
            last_correct_at=datetime.fromisoformat(last_correct_at) if last_correct_at else None,
            mastered=derive_mastered(score, data.get('mastered'))
        )

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> 'WordRecord':
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


class OutcomeKind(Enum):
    """Result categories of a practice attempt."""
    NEEDS_INPUT = "needs_input"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class PracticeOutcome:
    """Outcome of a practice attempt; ``expected`` is set for wrong answers."""
    kind: OutcomeKind
    expected: Optional[str] = None

    @property
    def is_correct(self) -> bool:
        return self.kind is OutcomeKind.CORRECT

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': self.kind.value, 'expected': self.expected}


@dataclass
class ImportResult:
    """Result of a bulk CSV import."""
    records: List[WordRecord] = field(default_factory=list)
    success: bool = False
    error: Optional[str] = None

    @property
    def imported(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'imported': self.imported,
            'error': self.error,
            'words': [record.to_dict() for record in self.records]
        }
