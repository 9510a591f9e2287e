"""
Base store interface for the word collection.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional

from word_trainer.errors import WordNotFoundError, error_handler
from word_trainer.models import WordRecord, WordFilter


class WordStore(ABC):
    """
    Base interface for word stores.

    Every mutating call is atomic: it either commits completely or raises
    and leaves the store as it was. Reads always reflect the last commit.
    """

    @abstractmethod
    def all_words(self) -> List[WordRecord]:
        """
        Return every stored word, newest first.

        Returns:
            List of WordRecord snapshots
        """
        pass

    @abstractmethod
    def create(
        self,
        native: str,
        foreign: str,
        score: int = 0,
        mastered: Optional[bool] = None,
        created_at: Optional[datetime] = None
    ) -> WordRecord:
        """
        Add a new word.

        Args:
            native: Word in the user's own language
            foreign: Word in the language being learned
            score: Initial score (clamped to zero or more)
            mastered: Explicit mastered flag; derived from score when None
            created_at: Creation time (defaults to now)

        Returns:
            The stored WordRecord

        Raises:
            InputValidationError: If native or foreign is empty after trimming
            PersistenceError: If the store cannot be written
        """
        pass

    @abstractmethod
    def update(self, record: WordRecord) -> WordRecord:
        """
        Replace the stored snapshot that has the same id.

        Args:
            record: Updated word

        Returns:
            The stored WordRecord

        Raises:
            InputValidationError: If native or foreign is empty after trimming
            WordNotFoundError: If no word has that id
            PersistenceError: If the store cannot be written
        """
        pass

    @abstractmethod
    def delete(self, word_ids: Iterable[str]) -> int:
        """
        Remove one or more words.

        Args:
            word_ids: Ids of the words to remove

        Returns:
            Number of words removed

        Raises:
            WordNotFoundError: If any id is unknown (nothing is removed)
            PersistenceError: If the store cannot be written
        """
        pass

    def get(self, word_id: str) -> WordRecord:
        """Look up a single word by id."""
        for word in self.all_words():
            if word.id == word_id:
                return word
        raise WordNotFoundError(error_handler.word_not_found(word_id))

    def list_words(
        self,
        word_filter: WordFilter = WordFilter.ALL,
        search: Optional[str] = None
    ) -> List[WordRecord]:
        """
        Query words for display.

        Args:
            word_filter: Which view of the collection to return
            search: Optional case-insensitive text matched against both sides

        Returns:
            Matching words in store order
        """
        needle = search.strip().casefold() if search else ""
        words = []
        for word in self.all_words():
            if not word_filter.matches(word):
                continue
            if needle and needle not in word.native.casefold() and needle not in word.foreign.casefold():
                continue
            words.append(word)
        return words

    def __len__(self) -> int:
        return len(self.all_words())
