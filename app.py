"""
app.py — Flask entry point for the TGREC soil profile recorder.

Initializes the Flask app, creates the on-device store, registers all route
blueprints and injects the form vocabularies into template context.

Run: python app.py → localhost:5000
"""

import logging
import os
import threading
from collections import deque

from flask import Flask, flash
from flask_wtf.csrf import CSRFProtect

import options
from database import get_db_path
from routes.auth import auth_bp
from routes.sheets import sheets_bp
from routes.summary import summary_bp
from storage import ProfileStore, get_current_user, get_store
from utils.autosave import DEFAULT_DELAY_MS

logger = logging.getLogger(__name__)

STORAGE_ERROR_MESSAGE = "Storage Error: failed to save data locally. Please try again."


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.secret_key = 'tgrec-soil-profile-local-app-secret-key'
    app.config['WTF_CSRF_CHECK_DEFAULT'] = True
    app.config['TEMPLATES_AUTO_RELOAD'] = True
    app.config['DATABASE'] = get_db_path()
    app.config['AUTOSAVE_DELAY_MS'] = DEFAULT_DELAY_MS
    app.config['AUTOSAVE_TIMER_FACTORY'] = threading.Timer

    if test_config:
        app.config.update(test_config)

    csrf = CSRFProtect(app)

    # Storage failures can happen on autosave timer threads, outside any
    # request; they are queued here and flashed on the next page load.
    notices = deque()

    def on_storage_error(key, error):
        notices.append(STORAGE_ERROR_MESSAGE)

    store = ProfileStore(
        app.config['DATABASE'],
        delay_ms=app.config['AUTOSAVE_DELAY_MS'],
        on_error=on_storage_error,
        timer_factory=app.config['AUTOSAVE_TIMER_FACTORY'],
    )
    try:
        store.init()
    except Exception as e:
        logger.warning("Could not initialize storage at %s: %s", app.config['DATABASE'], e)
    app.extensions['profile_store'] = store

    # Register blueprints
    app.register_blueprint(auth_bp)
    app.register_blueprint(sheets_bp)
    app.register_blueprint(summary_bp)

    @app.before_request
    def flash_storage_errors():
        """Surface autosave failures as notices."""
        seen = set()
        while notices:
            message = notices.popleft()
            if message not in seen:
                flash(message, 'error')
                seen.add(message)

    @app.context_processor
    def inject_globals():
        """Form vocabularies and the signed-in user for every template."""
        return {'options': options, 'current_user': get_current_user(get_store())}

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    # Debug mode: enabled by default for development (auto-reload on file changes)
    # Set FLASK_DEBUG=0 to disable for production
    debug = os.environ.get('FLASK_DEBUG', '1') != '0'
    app.run(host='localhost', port=5000, debug=debug)
