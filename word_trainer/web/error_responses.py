"""Centralized error response formatting for web API endpoints.

This module provides consistent error response formatting across all API endpoints,
including error codes, messages, and action_required fields.
"""

from typing import Dict, Any, Optional, Tuple
from flask import jsonify
import logging

from word_trainer.errors import ProcessingError

logger = logging.getLogger(__name__)


class ErrorCode:
    """Standard error codes for API responses."""

    # Word errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WORD_NOT_FOUND = "WORD_NOT_FOUND"
    NO_WORDS = "NO_WORDS"

    # Import errors
    NO_VALID_ROWS = "NO_VALID_ROWS"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    MISSING_FILE = "MISSING_FILE"

    # Storage errors
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"

    # Data validation errors
    INVALID_JSON = "INVALID_JSON"
    MISSING_DATA = "MISSING_DATA"

    # General errors
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ActionRequired:
    """Standard action_required values for error responses."""

    FIX_INPUT = "fix_input"
    REFRESH = "refresh"
    UPLOAD_FILES = "upload_files"
    CHECK_PERMISSIONS = "check_permissions"
    RETRY = "retry"
    CONTACT_SUPPORT = "contact_support"


def format_error_response(
    error_message: str,
    error_code: str,
    action_required: Optional[str] = None,
    additional_data: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Format a consistent error response for API endpoints.

    Args:
        error_message: Human-readable error message
        error_code: Machine-readable error code (use ErrorCode constants)
        action_required: Specific user action needed (use ActionRequired constants)
        additional_data: Additional data to include in response

    Returns:
        Dictionary formatted for JSON response

    Example:
        >>> format_error_response(
        ...     "Word not found",
        ...     ErrorCode.WORD_NOT_FOUND,
        ...     action_required=ActionRequired.REFRESH
        ... )
        {
            'success': False,
            'error': 'Word not found',
            'error_code': 'WORD_NOT_FOUND',
            'action_required': 'refresh'
        }
    """
    response = {
        'success': False,
        'error': error_message,
        'error_code': error_code
    }

    if action_required:
        response['action_required'] = action_required

    if additional_data:
        response.update(additional_data)

    return response


def validation_error_response(processing_error: ProcessingError) -> Tuple[Any, int]:
    """
    Create a standardized input validation error response.

    Args:
        processing_error: The rejected input, as described by ErrorHandler

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    response = format_error_response(
        error_message=processing_error.message,
        error_code=ErrorCode.VALIDATION_ERROR,
        action_required=ActionRequired.FIX_INPUT,
        additional_data={
            'details': processing_error.details,
            'suggested_actions': processing_error.suggested_actions
        }
    )

    return jsonify(response), 400


def missing_data_response(message: str) -> Tuple[Any, int]:
    """
    Create a standardized missing request data error response.

    Args:
        message: What was missing from the request

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.MISSING_DATA,
        action_required=ActionRequired.FIX_INPUT
    )

    return jsonify(response), 400


def invalid_json_response(message: str) -> Tuple[Any, int]:
    """
    Create a standardized response for a body that is not a JSON object.

    Args:
        message: What the endpoint expected

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.INVALID_JSON,
        action_required=ActionRequired.FIX_INPUT
    )

    return jsonify(response), 400


def missing_file_response() -> Tuple[Any, int]:
    """
    Create a standardized response for an import request without a file.

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    response = format_error_response(
        error_message="No CSV file provided. Upload a file in the 'file' field or send CSV text as the body.",
        error_code=ErrorCode.MISSING_FILE,
        action_required=ActionRequired.UPLOAD_FILES
    )

    return jsonify(response), 400


def word_not_found_response(word_id: str) -> Tuple[Any, int]:
    """
    Create a standardized word not found error response.

    Args:
        word_id: The word ID that was not found

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    message = (
        f"Word not found: {word_id}. "
        "It may have been deleted. Please refresh the word list."
    )

    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.WORD_NOT_FOUND,
        action_required=ActionRequired.REFRESH
    )

    return jsonify(response), 404


def no_words_response() -> Tuple[Any, int]:
    """
    Create a standardized response for an empty practice selection.

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    response = format_error_response(
        error_message="No words to practice. Add words or choose a different filter.",
        error_code=ErrorCode.NO_WORDS,
        action_required=ActionRequired.FIX_INPUT
    )

    return jsonify(response), 404


def no_valid_rows_response() -> Tuple[Any, int]:
    """
    Create a standardized response for an import that found nothing.

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    message = (
        "No valid rows found. "
        "Use two comma-separated columns (native,foreign) in UTF-8 or UTF-16 text."
    )

    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.NO_VALID_ROWS,
        action_required=ActionRequired.UPLOAD_FILES,
        additional_data={'imported': 0}
    )

    return jsonify(response), 400


def file_too_large_response(max_size_mb: int = 5) -> Tuple[Any, int]:
    """
    Create a standardized file too large error response.

    Args:
        max_size_mb: Maximum allowed file size in MB

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    message = (
        f"File too large. Maximum file size is {max_size_mb}MB. "
        "Please split the word list into smaller files."
    )

    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.FILE_TOO_LARGE,
        action_required=ActionRequired.UPLOAD_FILES
    )

    return jsonify(response), 413


def persistence_error_response(processing_error: ProcessingError) -> Tuple[Any, int]:
    """
    Create a standardized storage failure response.

    Args:
        processing_error: Description of the failed write

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    if processing_error.error_code == "STORE_001":
        action_required = ActionRequired.CHECK_PERMISSIONS
        message = f"{processing_error.message}. Check that the data directory is writable."
    else:
        action_required = ActionRequired.RETRY
        message = f"{processing_error.message}. Please try again."

    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.PERSISTENCE_ERROR,
        action_required=action_required,
        additional_data={'suggested_actions': processing_error.suggested_actions}
    )

    return jsonify(response), 500


def unexpected_error_response(
    error_details: Optional[str] = None,
    include_details: bool = False
) -> Tuple[Any, int]:
    """
    Create a standardized unexpected error response.

    Args:
        error_details: Details about the error (for logging)
        include_details: Whether to include error details in response (dev mode)

    Returns:
        Tuple of (jsonify response, HTTP status code)
    """
    if include_details and error_details:
        message = f"An unexpected error occurred: {error_details}"
    else:
        message = (
            "An unexpected error occurred. "
            "Please try again or contact support if the problem persists."
        )

    response = format_error_response(
        error_message=message,
        error_code=ErrorCode.UNEXPECTED_ERROR,
        action_required=ActionRequired.CONTACT_SUPPORT
    )

    return jsonify(response), 500
