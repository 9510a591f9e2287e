"""
Bulk import of CSV word lists into a store.
"""

import logging

from word_trainer.errors import PersistenceError, error_handler
from word_trainer.importers.csv_importer import parse_csv
from word_trainer.models import ImportResult
from word_trainer.store.base import WordStore

logger = logging.getLogger(__name__)


def import_words(store: WordStore, data: bytes, source: str = None) -> ImportResult:
    """
    Parse CSV bytes and add every pair as a new word.

    Words are inserted one at a time in file order, each starting with a
    score of 0. If the store fails part way, a single PersistenceError is
    raised for the whole batch and words already inserted stay in place.

    Args:
        store: Store receiving the new words
        data: Raw CSV file contents
        source: Optional file name, used for logging

    Returns:
        ImportResult with the inserted words, or an error message when the
        file held no usable rows

    Raises:
        PersistenceError: If the store cannot be written
    """
    pairs = parse_csv(data)
    label = source or "CSV data"

    if not pairs:
        import_error = error_handler.handle_import_error(context={'source': label})
        error_handler.add_error(import_error)
        return ImportResult(success=False, error=import_error.message)

    result = ImportResult()
    for native, foreign in pairs:
        try:
            result.records.append(store.create(native, foreign))
        except PersistenceError as e:
            e.processing_error.context.update({
                'source': label,
                'imported': result.imported,
                'total': len(pairs)
            })
            logger.error(f"Import of {label} failed after {result.imported} of {len(pairs)} word(s)")
            raise

    result.success = True
    logger.info(f"Imported {result.imported} word(s) from {label}")
    return result
