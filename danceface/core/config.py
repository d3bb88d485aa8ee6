"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Return an integer environment variable or raise an error."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Server ---------------------------------------------------------------------
PORT = _env_int("PORT", 3001)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RELOAD = _env_bool("RELOAD", False)


# Storage --------------------------------------------------------------------
DATA_DIR = Path(os.getenv("DATA_DIR") or _PROJECT_ROOT / "data")
WALLETS_FILE = DATA_DIR / "wallets.json"
LEADERBOARD_FILE = DATA_DIR / "leaderboard.json"


# Admin authentication -------------------------------------------------------
ADMIN_USER = os.getenv("ADMIN_USER", "danceface")
ADMIN_PASS = os.getenv("ADMIN_PASS", "ordinals2024")
ADMIN_TOKEN_PREFIX = "admin-token-"
ADMIN_TOKEN_MAX_AGE = _env_int("ADMIN_TOKEN_MAX_AGE", 60 * 60 * 24)

SECRET_KEY = os.getenv("SECRET_KEY") or "danceface-dev-secret"


# CORS -----------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_deployed_origins = ["https://dance-face-wl.up.railway.app"]

_local_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3001",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_deployed_origins,
        *_local_dev_origins,
    ]
)


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
]
