# Gunicorn settings: gunicorn -c gunicorn.conf.py run:app
import logging
import os

from config import Config

bind = f"{Config.HOST}:{Config.PORT}"
workers = int(os.environ.get('WEB_CONCURRENCY', '1') or 1)
loglevel = logging.getLevelName(Config.LOG_LEVEL).lower()
accesslog = None


def when_ready(server):
    server.log.info(f"listening on {Config.PORT}")
