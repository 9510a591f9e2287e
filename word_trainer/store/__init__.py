"""
Word stores: the persistence boundary for the word collection.
"""

from word_trainer.store.base import WordStore
from word_trainer.store.memory_store import InMemoryWordStore
from word_trainer.store.json_store import JsonWordStore
from word_trainer.store.samples import sample_words

__all__ = [
    'WordStore',
    'InMemoryWordStore',
    'JsonWordStore',
    'sample_words'
]
