"""
Import module for loading word lists from CSV files.
"""

from word_trainer.importers.csv_importer import (
    parse_csv,
    split_csv_line
)
from word_trainer.importers.word_importer import (
    import_words
)

__all__ = [
    'parse_csv',
    'split_csv_line',
    'import_words'
]
