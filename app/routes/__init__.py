"""
Routes package initialization.
Registers the blueprint that serves the hello server's single route.
"""

import logging
from flask import Blueprint, current_app

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)


@main_bp.get('/')
def index():
    """Root route - always answers with the configured greeting."""
    return current_app.config['GREETING']


def register_blueprints(app):
    """Register all blueprints with the Flask application."""
    app.register_blueprint(main_bp)
    logger.debug("Blueprints registered: %s", list(app.blueprints))


__all__ = ['main_bp', 'register_blueprints']
