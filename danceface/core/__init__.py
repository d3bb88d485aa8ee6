"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    ADMIN_TOKEN_MAX_AGE,
    ADMIN_TOKEN_PREFIX,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    DATA_DIR,
    LEADERBOARD_FILE,
    LOG_LEVEL,
    PORT,
    RELOAD,
    SECRET_KEY,
    WALLETS_FILE,
)
from .errors import (
    AuthorizationError,
    DanceFaceError,
    PersistenceError,
    ValidationError,
)
from .logging_setup import configure_logging
from .time import as_utc, utcnow

__all__ = [
    "ADMIN_PASS",
    "ADMIN_TOKEN_MAX_AGE",
    "ADMIN_TOKEN_PREFIX",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "DATA_DIR",
    "LEADERBOARD_FILE",
    "LOG_LEVEL",
    "PORT",
    "RELOAD",
    "SECRET_KEY",
    "WALLETS_FILE",
    "AuthorizationError",
    "DanceFaceError",
    "PersistenceError",
    "ValidationError",
    "as_utc",
    "configure_logging",
    "utcnow",
]
