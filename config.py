import os
import re
import logging
from dotenv import load_dotenv

# Load environment variables from .env file (real environment wins)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = 'INFO'

_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


def resolve_port(value, default=DEFAULT_PORT):
    """Turn a raw PORT value into a usable TCP port.

    Missing or blank values give the default silently. Anything that is not a
    plain integer in 0..65535 also gives the default, with a warning.
    """
    if value is None:
        return default
    text = str(value).strip()
    if not text:
        return default
    if not _PORT_PATTERN.fullmatch(text):
        logger.warning(f"Ignoring invalid PORT value {value!r}, using {default}")
        return default
    port = int(text)
    if not 0 <= port <= 65535:
        logger.warning(f"PORT {port} is out of range, using {default}")
        return default
    return port


def resolve_log_level(value, default=DEFAULT_LOG_LEVEL):
    """Map a LOG_LEVEL name onto a logging level number."""
    fallback = getattr(logging, default)
    if not value:
        return fallback
    level = getattr(logging, str(value).strip().upper(), None)
    if not isinstance(level, int):
        return fallback
    return level


class Config:
    # Network
    HOST = '0.0.0.0'
    PORT = resolve_port(os.environ.get('PORT'))

    # Response served on the root path
    GREETING = 'hello world'

    # Logging
    LOG_LEVEL = resolve_log_level(os.environ.get('LOG_LEVEL'))
