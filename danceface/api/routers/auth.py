"""Admin login route."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter

from ...core.errors import AuthorizationError
from ...core.security import check_admin_credentials, issue_admin_token

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/api/admin/login")
def admin_login(body: Dict[str, Any]):
    """Exchange admin credentials for a signed admin token."""

    if not check_admin_credentials(body.get("username"), body.get("password")):
        logger.warning("Failed admin login for %r", body.get("username"))
        raise AuthorizationError("Invalid credentials")
    return {"success": True, "token": issue_admin_token()}


__all__ = ["router"]
