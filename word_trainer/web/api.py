"""API endpoints for the word list, practice, import and statistics."""

import logging
from flask import Blueprint, jsonify, request, current_app
from werkzeug.exceptions import RequestEntityTooLarge

from word_trainer.config import Config
from word_trainer.errors import InputValidationError, PersistenceError, WordNotFoundError, error_handler
from word_trainer.importers import import_words
from word_trainer.models import WordFilter
from word_trainer.practice import (
    EditCommand,
    PracticeAttemptCommand,
    feedback_message,
    pick_random_word
)
from word_trainer.settings import UserSettings
from word_trainer.stats import summarize
from word_trainer.web.error_responses import (
    validation_error_response,
    missing_data_response,
    invalid_json_response,
    missing_file_response,
    word_not_found_response,
    no_words_response,
    no_valid_rows_response,
    file_too_large_response,
    persistence_error_response,
    unexpected_error_response
)

# Create logger
logger = logging.getLogger(__name__)

# Create API blueprint
bp = Blueprint('api', __name__, url_prefix='/api')


def _store():
    return current_app.config['WORD_STORE']


def _settings_manager():
    return current_app.config['SETTINGS_MANAGER']


@bp.before_request
def reset_error_handler():
    """Keep the shared error handler scoped to the current request."""
    error_handler.clear_errors()


def _requested_filter() -> WordFilter:
    """Filter from the query string, else the saved preference."""
    saved = _settings_manager().load().word_filter
    return WordFilter.parse(request.args.get('filter'), default=saved)


@bp.errorhandler(WordNotFoundError)
def handle_word_not_found(e):
    """Handle lookups of deleted or unknown words."""
    word_id = e.processing_error.context.get('word_id', '')
    logger.warning(f"Word not found: {word_id}")
    return word_not_found_response(word_id)


@bp.errorhandler(InputValidationError)
def handle_validation_error(e):
    """Handle rejected word fields."""
    return validation_error_response(e.processing_error)


@bp.errorhandler(PersistenceError)
def handle_persistence_error(e):
    """Handle failed writes to the word store."""
    logger.error(f"Persistence error: {e.processing_error.details}")
    return persistence_error_response(e.processing_error)


@bp.errorhandler(RequestEntityTooLarge)
def handle_file_too_large(e):
    """Handle file upload size limit exceeded."""
    logger.warning(f"File upload size limit exceeded: {e}")
    return file_too_large_response(max_size_mb=Config.MAX_IMPORT_SIZE // (1024 * 1024))


# Custom error handler for general exceptions
@bp.errorhandler(Exception)
def handle_unexpected_error(e):
    """Handle unexpected errors with proper logging."""
    logger.error(f"Unexpected error: {e}", exc_info=True)

    # In development, include more details
    include_details = current_app.debug

    return unexpected_error_response(
        error_details=str(e),
        include_details=include_details
    )


@bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'ok',
        'message': 'Word Trainer API is running'
    })


@bp.route('/words', methods=['GET'])
def list_words():
    """
    List words.

    Query parameters:
        - filter: "all", "to_practice" or "mastered" (defaults to the saved filter)
        - search: case-insensitive text matched against both sides
    """
    word_filter = _requested_filter()
    words = _store().list_words(word_filter, search=request.args.get('search'))
    return jsonify({
        'success': True,
        'filter': word_filter.value,
        'count': len(words),
        'data': [word.to_dict() for word in words]
    })


@bp.route('/words', methods=['POST'])
def create_word():
    """Add a word from JSON ``{"native": ..., "foreign": ...}``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return invalid_json_response("Request body must be a JSON object with native and foreign")

    record = _store().create(data.get('native'), data.get('foreign'))
    logger.info(f"Added word '{record.native}'")
    return jsonify({'success': True, 'data': record.to_dict()}), 201


@bp.route('/words/<word_id>', methods=['GET'])
def get_word(word_id):
    """Get a single word."""
    record = _store().get(word_id)
    return jsonify({'success': True, 'data': record.to_dict()})


@bp.route('/words/<word_id>', methods=['PUT'])
def edit_word(word_id):
    """
    Edit a word.

    Accepts any of native, foreign, score and mastered; omitted fields keep
    their current values.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return invalid_json_response("Request body must be a JSON object")

    store = _store()
    current = store.get(word_id)
    command = EditCommand(
        native=data.get('native', current.native),
        foreign=data.get('foreign', current.foreign),
        score=data.get('score'),
        mastered=data.get('mastered')
    )
    record = store.update(command.apply(current))
    return jsonify({'success': True, 'data': record.to_dict()})


@bp.route('/words', methods=['DELETE'])
def delete_words():
    """Delete several words from JSON ``{"ids": [...]}``."""
    data = request.get_json(silent=True) or {}
    ids = data.get('ids') if isinstance(data, dict) else None
    if not ids or not isinstance(ids, list):
        return missing_data_response("No IDs provided")

    deleted = _store().delete(ids)
    return jsonify({'success': True, 'deleted': deleted})


@bp.route('/words/<word_id>', methods=['DELETE'])
def delete_word(word_id):
    """Delete a single word."""
    deleted = _store().delete([word_id])
    return jsonify({'success': True, 'deleted': deleted})


@bp.route('/words/<word_id>/practice', methods=['POST'])
def practice_word(word_id):
    """
    Check an answer for a word.

    Returns JSON with:
        - outcome: {"kind": "correct" | "incorrect" | "needs_input", "expected": str | None}
        - feedback: message to show the user
        - data: the word after scoring
    """
    data = request.get_json(silent=True) or {}
    answer = data.get('answer') if isinstance(data, dict) else None
    # null, numbers and other non-text answers count as no answer
    if not isinstance(answer, str):
        answer = ''

    outcome, record = PracticeAttemptCommand(answer=answer).execute(_store(), word_id)
    return jsonify({
        'success': True,
        'outcome': outcome.to_dict(),
        'feedback': feedback_message(outcome),
        'data': record.to_dict()
    })


@bp.route('/practice/random', methods=['GET'])
def random_word():
    """Pick a random word from the requested (or saved) filter."""
    word = pick_random_word(_store().list_words(_requested_filter()))
    if word is None:
        return no_words_response()
    return jsonify({'success': True, 'data': word.to_dict()})


@bp.route('/import', methods=['POST'])
def import_csv():
    """
    Import words from a CSV file.

    Accepts a multipart upload in the ``file`` field or the raw CSV as the
    request body.
    """
    upload = request.files.get('file')
    if upload is not None:
        data = upload.read()
        source = upload.filename
    else:
        data = request.get_data()
        source = None

    if not data:
        return missing_file_response()

    result = import_words(_store(), data, source=source)
    if not result.success:
        return no_valid_rows_response()

    return jsonify(result.to_dict()), 201


@bp.route('/stats', methods=['GET'])
def stats():
    """Summary counts and words learned per month."""
    summary = summarize(_store().all_words())
    return jsonify({'success': True, 'data': summary.to_dict()})


@bp.route('/settings', methods=['GET'])
def get_settings():
    """Current user settings."""
    return jsonify({'success': True, 'data': _settings_manager().load().to_dict()})


@bp.route('/settings', methods=['PUT'])
def update_settings():
    """Update the saved word filter and/or daily target."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return invalid_json_response("Request body must be a JSON object")

    manager = _settings_manager()
    current = manager.load()
    settings = UserSettings.from_dict({
        'word_filter': data.get('word_filter', current.word_filter.value),
        'daily_target': data.get('daily_target', current.daily_target)
    })
    manager.save(settings)
    return jsonify({'success': True, 'data': settings.to_dict()})
