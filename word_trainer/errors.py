"""
Error handling system for the Word Trainer.

This module provides centralized error definitions, input validation,
and actionable error messages for word editing, practice, import and storage.
"""

import logging
from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors that can occur while managing words."""
    INPUT_VALIDATION = "input_validation"
    CSV_IMPORT = "csv_import"
    PERSISTENCE = "persistence"
    NOT_FOUND = "not_found"
    FILE_SYSTEM = "file_system"


@dataclass
class ProcessingError:
    """Represents an error with context and guidance."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: str
    suggested_actions: List[str]
    error_code: str
    context: Dict[str, Any] = None

    def __post_init__(self):
        if self.context is None:
            self.context = {}


class WordTrainerError(Exception):
    """Base exception for Word Trainer errors."""

    def __init__(self, processing_error: ProcessingError):
        self.processing_error = processing_error
        super().__init__(processing_error.message)


class InputValidationError(WordTrainerError):
    """Raised when user input (word fields, score) is rejected."""
    pass


class PersistenceError(WordTrainerError):
    """Raised when the word store cannot be written."""
    pass


class WordNotFoundError(WordTrainerError):
    """Raised when a word id is not present in the store."""
    pass


class ErrorHandler:
    """
    Centralized error handling and reporting system.

    Provides error detection, categorization, and actionable guidance
    for every operation on the word collection.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.errors: List[ProcessingError] = []
        self.warnings: List[ProcessingError] = []

    def add_error(self, error: ProcessingError) -> None:
        """Add an error to the collection."""
        if error.severity in [ErrorSeverity.ERROR, ErrorSeverity.CRITICAL]:
            self.errors.append(error)
        elif error.severity == ErrorSeverity.WARNING:
            self.warnings.append(error)

        # Log the error
        log_level = {
            ErrorSeverity.INFO: logging.INFO,
            ErrorSeverity.WARNING: logging.WARNING,
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.CRITICAL: logging.CRITICAL
        }[error.severity]

        self.logger.log(log_level, f"[{error.error_code}] {error.message}")
        if error.details:
            self.logger.log(log_level, f"Details: {error.details}")

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if any warnings have been recorded."""
        return len(self.warnings) > 0

    def get_error_summary(self) -> Dict[str, Any]:
        """Get a summary of all errors and warnings."""
        return {
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'errors': [self._format_error_for_summary(e) for e in self.errors],
            'warnings': [self._format_error_for_summary(e) for e in self.warnings]
        }

    def _format_error_for_summary(self, error: ProcessingError) -> Dict[str, Any]:
        """Format error for summary display."""
        return {
            'code': error.error_code,
            'category': error.category.value,
            'severity': error.severity.value,
            'message': error.message,
            'suggested_actions': error.suggested_actions
        }

    def clear_errors(self) -> None:
        """Clear all recorded errors and warnings."""
        self.errors.clear()
        self.warnings.clear()

    def validate_word_fields(self, native: Optional[str], foreign: Optional[str]) -> Optional[ProcessingError]:
        """Validate that both sides of a word pair are non-empty after trimming."""
        missing = []
        if not native or not native.strip():
            missing.append("native")
        if not foreign or not foreign.strip():
            missing.append("foreign")

        if not missing:
            return None

        return ProcessingError(
            category=ErrorCategory.INPUT_VALIDATION,
            severity=ErrorSeverity.ERROR,
            message="Native and foreign words are required",
            details=f"Empty field(s): {', '.join(missing)}",
            suggested_actions=[
                "Enter the word in your own language",
                "Enter its translation in the language you are learning"
            ],
            error_code="INPUT_001",
            context={'fields': missing}
        )

    def validate_score(self, score: Any) -> Optional[ProcessingError]:
        """Validate that a score can be read as a whole number."""
        if isinstance(score, bool):
            score = None
        try:
            int(score)
        except (TypeError, ValueError):
            return ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Score must be a whole number",
                details=f"Could not read score from: {score!r}",
                suggested_actions=[
                    "Enter a number such as 0, 3 or 10",
                    "Leave the score unchanged to keep the current value"
                ],
                error_code="INPUT_002"
            )
        return None

    def validate_mastered(self, mastered: Any) -> Optional[ProcessingError]:
        """Validate that a mastered flag is a real boolean, not text or a number."""
        if isinstance(mastered, bool):
            return None
        return ProcessingError(
            category=ErrorCategory.INPUT_VALIDATION,
            severity=ErrorSeverity.ERROR,
            message="Mastered must be true or false",
            details=f"Could not read mastered flag from: {mastered!r}",
            suggested_actions=[
                "Send mastered as a JSON boolean (true or false)",
                "Leave mastered out to keep the current value"
            ],
            error_code="INPUT_003"
        )

    def word_not_found(self, word_id: str) -> ProcessingError:
        """Describe a lookup of an unknown word id."""
        return ProcessingError(
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.ERROR,
            message="Word not found",
            details=f"No word with id {word_id} exists in the store",
            suggested_actions=[
                "Refresh the word list",
                "Check that the word has not been deleted"
            ],
            error_code="WORD_001",
            context={'word_id': word_id}
        )

    def handle_persistence_error(self, error: Exception, context: Dict[str, Any] = None) -> ProcessingError:
        """Handle failures writing the word store."""
        error_str = str(error).lower()

        if 'permission' in error_str or 'denied' in error_str:
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Permission denied writing word data",
                details=f"Cannot write word store: {error}",
                suggested_actions=[
                    "Check write permissions for the data directory",
                    "Choose a different data directory with --data-dir",
                    "Run with appropriate user permissions"
                ],
                error_code="STORE_001",
                context=context
            )

        if 'space' in error_str or 'disk' in error_str:
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Insufficient disk space",
                details=f"Not enough disk space to save words: {error}",
                suggested_actions=[
                    "Free up disk space",
                    "Choose a different data directory with more space"
                ],
                error_code="STORE_002",
                context=context
            )

        return ProcessingError(
            category=ErrorCategory.PERSISTENCE,
            severity=ErrorSeverity.ERROR,
            message="Failed to save words",
            details=f"Word store write failed: {error}",
            suggested_actions=[
                "Try the operation again",
                "Check that the data directory exists and is writable"
            ],
            error_code="STORE_003",
            context=context
        )

    def handle_import_error(self, context: Dict[str, Any] = None) -> ProcessingError:
        """Describe an import that produced no usable rows."""
        return ProcessingError(
            category=ErrorCategory.CSV_IMPORT,
            severity=ErrorSeverity.WARNING,
            message="No valid rows found",
            details="The file contained no lines with both a native and a foreign word",
            suggested_actions=[
                "Use two comma-separated columns: native,foreign",
                "Save the file as UTF-8 or UTF-16 text",
                "Wrap values containing commas in double quotes"
            ],
            error_code="IMPORT_001",
            context=context
        )


# Global error handler instance
error_handler = ErrorHandler()
