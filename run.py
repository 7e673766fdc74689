"""Application entry point.

``gunicorn -c gunicorn.conf.py run:app`` serves the module-level ``app`` in
production; ``python run.py`` starts the built-in threaded server instead.
"""

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from config import Config  # noqa: E402

if __name__ == '__main__':
    # Root handler must exist before create_app() so Flask skips its own
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

from app import create_app  # noqa: E402

app = create_app()

if __name__ == '__main__':
    from app.server import serve

    serve(app)
