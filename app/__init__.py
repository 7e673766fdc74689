"""
Flask application factory for the hello server.
"""

import logging
from flask import Flask
from config import Config

logger = logging.getLogger(__name__)


def create_app(config_object=Config):
    """Build a configured Flask app serving the greeting on '/'."""
    # No static folder: the root route is the only thing served
    app = Flask(__name__, static_folder=None, static_url_path=None)
    app.config.from_object(config_object)

    # Apply LOG_LEVEL to the root logger and the Flask app logger
    log_level = app.config.get('LOG_LEVEL', logging.INFO)
    logging.getLogger().setLevel(log_level)
    app.logger.setLevel(log_level)

    from .routes import register_blueprints
    register_blueprints(app)

    logger.debug("Application created with port %s", app.config.get('PORT'))
    return app
