"""Admin credential checks and signed admin tokens."""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import Header
from itsdangerous import BadSignature, SignatureExpired, TimestampSigner

from .config import (
    ADMIN_PASS,
    ADMIN_TOKEN_MAX_AGE,
    ADMIN_TOKEN_PREFIX,
    ADMIN_USER,
    SECRET_KEY,
)
from .errors import AuthorizationError

logger = logging.getLogger(__name__)

_signer = TimestampSigner(SECRET_KEY, salt="danceface-admin")


def check_admin_credentials(username: Optional[str], password: Optional[str]) -> bool:
    ok_user = secrets.compare_digest(str(username or "").encode(), ADMIN_USER.encode())
    ok_pass = secrets.compare_digest(str(password or "").encode(), ADMIN_PASS.encode())
    return ok_user and ok_pass


def issue_admin_token() -> str:
    """Mint a token for the configured admin user."""

    signed = _signer.sign(secrets.token_urlsafe(16)).decode()
    return ADMIN_TOKEN_PREFIX + signed


def verify_admin_token(token: Optional[str], max_age: int = ADMIN_TOKEN_MAX_AGE) -> None:
    """Raise ``AuthorizationError`` unless ``token`` is a live admin token."""

    if not token or not token.startswith(ADMIN_TOKEN_PREFIX):
        raise AuthorizationError("Unauthorized")
    try:
        _signer.unsign(token[len(ADMIN_TOKEN_PREFIX):], max_age=max_age)
    except SignatureExpired as exc:
        logger.warning("Rejected expired admin token")
        raise AuthorizationError("Unauthorized") from exc
    except BadSignature as exc:
        logger.warning("Rejected admin token with bad signature")
        raise AuthorizationError("Unauthorized") from exc


def _token_from_header(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if rest and scheme.lower() == "bearer":
        return rest.strip()
    return value


def require_admin(authorization: Optional[str] = Header(None)) -> bool:
    """FastAPI dependency guarding admin endpoints."""

    verify_admin_token(_token_from_header(authorization))
    return True


__all__ = [
    "check_admin_credentials",
    "issue_admin_token",
    "require_admin",
    "verify_admin_token",
]
