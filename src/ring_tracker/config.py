"""Runtime configuration read from environment variables."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Default data directory (repository root / data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DEV_SECRET_KEY = "ring-tracker-dev-secret"
DEFAULT_TOKEN_TTL_DAYS = 30


def get_data_dir() -> Path:
    """Get the data directory, honouring RING_TRACKER_DATA_DIR."""
    override = os.getenv("RING_TRACKER_DATA_DIR")
    if override:
        return Path(override)
    return DATA_DIR


def get_secret_key() -> str:
    """Get the session token signing secret."""
    secret = os.getenv("RING_TRACKER_SECRET_KEY")
    if not secret:
        logger.warning(
            "RING_TRACKER_SECRET_KEY is not set; using the development secret"
        )
        return DEV_SECRET_KEY
    return secret


def get_token_ttl_days() -> int:
    """Get the session lifetime in days."""
    raw = os.getenv("RING_TRACKER_TOKEN_TTL_DAYS")
    if not raw:
        return DEFAULT_TOKEN_TTL_DAYS
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid RING_TRACKER_TOKEN_TTL_DAYS=%r, using default", raw)
        return DEFAULT_TOKEN_TTL_DAYS


def get_log_level() -> str:
    """Get the log level used by the web server."""
    return os.getenv("RING_TRACKER_LOG_LEVEL", "INFO").upper()
