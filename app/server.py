"""
Built-in WSGI listener for running the hello server without Gunicorn.
"""

import logging
from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


def create_server(app, host=None, port=None):
    """Bind a threaded Werkzeug server for ``app``.

    Host and port default to the app's HOST and PORT settings. A bind failure
    is fatal and turns into ``SystemExit(1)``; it is never retried.
    """
    if host is None:
        host = app.config['HOST']
    if port is None:
        port = app.config['PORT']

    try:
        server = make_server(host, port, app, threaded=True)
    except SystemExit:
        # Werkzeug reports bind errors itself and exits with status 1
        logger.error(f"Could not bind {host}:{port}")
        raise

    logger.info(f"listening on {server.server_port}")
    return server


def serve(app=None):
    """Create the server and block until interrupted."""
    if app is None:
        from . import create_app
        app = create_app()

    server = create_server(app)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()
