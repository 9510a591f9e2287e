"""Flask application serving the Word Trainer JSON API."""

from flask import Flask
from flask_cors import CORS
import os
import logging

from word_trainer.config import Config
from word_trainer.settings import SettingsManager
from word_trainer.store import JsonWordStore


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(store=None, settings_manager=None):
    """
    Create and configure the Flask application.

    Args:
        store: WordStore to serve. If None, a JsonWordStore in the
               configured data directory is used.
        settings_manager: SettingsManager for user preferences. If None,
                          settings.json in the data directory is used.
    """
    app = Flask(__name__)

    # Configure CORS for API endpoints
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "PUT", "DELETE"],
            "allow_headers": ["Content-Type"]
        }
    })

    # Configure upload settings
    app.config['MAX_CONTENT_LENGTH'] = Config.MAX_IMPORT_SIZE

    if store is None:
        data_dir = Config.ensure_directories()
        store = JsonWordStore(Config.words_path(data_dir))
        logger.info(f"Serving {len(store)} word(s) from {store.path}")
    if settings_manager is None:
        settings_manager = SettingsManager(Config.settings_path())

    app.config['WORD_STORE'] = store
    app.config['SETTINGS_MANAGER'] = settings_manager

    # Register routes
    from word_trainer.web import api
    app.register_blueprint(api.bp)

    return app


if __name__ == '__main__':
    # Security: Use environment variables to control debug mode and host binding
    # Never run with debug=True and host='0.0.0.0' in production
    debug_mode = os.environ.get('FLASK_DEBUG', 'True').lower() == 'true'
    host = '127.0.0.1' if debug_mode else '0.0.0.0'
    port = int(os.environ.get('FLASK_PORT', '3000'))

    app = create_app()

    if debug_mode:
        print("⚠️  WARNING: Running in DEBUG mode - server restricted to localhost")
        print(f"Server: http://localhost:{port}")
    else:
        print(f"Server: http://0.0.0.0:{port}")

    app.run(debug=debug_mode, host=host, port=port)
