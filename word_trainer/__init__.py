"""
Word Trainer

A flashcard-style vocabulary trainer: add native/foreign word pairs,
practice translating them and track progress towards mastery.
"""

__version__ = "0.1.0"
