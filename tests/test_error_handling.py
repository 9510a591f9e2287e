"""
Tests for the error handling system.
"""

import pytest

from word_trainer.errors import (
    ErrorHandler, ProcessingError, ErrorCategory, ErrorSeverity,
    InputValidationError, WordTrainerError
)


class TestErrorHandler:
    """Test the error handling system."""

    def test_error_handler_initialization(self):
        """Test error handler initializes correctly."""
        handler = ErrorHandler()
        assert handler.errors == []
        assert handler.warnings == []
        assert not handler.has_errors()
        assert not handler.has_warnings()

    def test_add_error_and_warning(self):
        """Test that severities are sorted into errors and warnings."""
        handler = ErrorHandler()

        handler.add_error(handler.handle_persistence_error(OSError("boom")))
        handler.add_error(handler.handle_import_error())

        assert handler.has_errors()
        assert handler.has_warnings()
        summary = handler.get_error_summary()
        assert summary['error_count'] == 1
        assert summary['warning_count'] == 1
        assert summary['errors'][0]['code'] == "STORE_003"
        assert summary['warnings'][0]['category'] == "csv_import"

    def test_info_is_not_recorded(self):
        handler = ErrorHandler()
        handler.add_error(ProcessingError(
            category=ErrorCategory.CSV_IMPORT,
            severity=ErrorSeverity.INFO,
            message="Note",
            details="",
            suggested_actions=[],
            error_code="TEST_001"
        ))
        assert not handler.has_errors()
        assert not handler.has_warnings()

    def test_clear_errors(self):
        handler = ErrorHandler()
        handler.add_error(handler.word_not_found("x"))
        handler.clear_errors()
        assert not handler.has_errors()


class TestValidation:
    """Test input validation helpers."""

    def test_valid_fields(self):
        assert ErrorHandler().validate_word_fields("House", "Maison") is None

    @pytest.mark.parametrize("native,foreign,missing", [
        ("", "Maison", ["native"]),
        ("House", "  ", ["foreign"]),
        (None, None, ["native", "foreign"]),
    ])
    def test_missing_fields(self, native, foreign, missing):
        error = ErrorHandler().validate_word_fields(native, foreign)
        assert error.error_code == "INPUT_001"
        assert error.category is ErrorCategory.INPUT_VALIDATION
        assert error.context['fields'] == missing

    @pytest.mark.parametrize("score", [0, 7, "12", -3])
    def test_valid_scores(self, score):
        assert ErrorHandler().validate_score(score) is None

    @pytest.mark.parametrize("score", ["x", None, False, [1]])
    def test_invalid_scores(self, score):
        assert ErrorHandler().validate_score(score).error_code == "INPUT_002"


    @pytest.mark.parametrize("mastered", [True, False])
    def test_valid_mastered(self, mastered):
        assert ErrorHandler().validate_mastered(mastered) is None

    @pytest.mark.parametrize("mastered", ["false", 0, None])
    def test_invalid_mastered(self, mastered):
        assert ErrorHandler().validate_mastered(mastered).error_code == "INPUT_003"


class TestPersistenceErrors:
    """Test classification of storage failures."""

    @pytest.mark.parametrize("message,code", [
        ("Permission denied", "STORE_001"),
        ("No space left on device", "STORE_002"),
        ("Disk quota exceeded", "STORE_002"),
        ("Input/output error", "STORE_003"),
    ])
    def test_classification(self, message, code):
        error = ErrorHandler().handle_persistence_error(OSError(message), context={'path': "words.json"})
        assert error.error_code == code
        assert error.context == {'path': "words.json"}


def test_exception_carries_processing_error():
    """Test that exceptions expose their ProcessingError."""
    processing_error = ErrorHandler().validate_word_fields("", "")
    error = InputValidationError(processing_error)

    assert isinstance(error, WordTrainerError)
    assert error.processing_error is processing_error
    assert str(error) == "Native and foreign words are required"
