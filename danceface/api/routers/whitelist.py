"""Wallet whitelist endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from ...core.security import require_admin
from ...core.storage import JsonRecordStore, get_whitelist_store
from ...models import WhitelistEntry
from ...services.whitelist import export_wallets, register_wallet

router = APIRouter(tags=["whitelist"])
logger = logging.getLogger(__name__)

WhitelistStore = JsonRecordStore[WhitelistEntry]


@router.post("/api/whitelist")
def join_whitelist(
    body: Dict[str, Any], store: WhitelistStore = Depends(get_whitelist_store)
):
    """Register a wallet address for the whitelist."""

    with store.transaction() as entries:
        entry = register_wallet(
            entries,
            body.get("address"),
            email=body.get("email"),
            twitter=body.get("twitter"),
        )
        position = len(entries)

    logger.info("Whitelisted %s at position %s", entry.address, position)
    return {
        "success": True,
        "message": "Welcome to the DanceFace crew!",
        "position": position,
    }


@router.get("/api/wallets", response_model=List[WhitelistEntry])
def list_wallets(store: WhitelistStore = Depends(get_whitelist_store)):
    """List every whitelist signup."""

    return store.load_all()


@router.get("/api/admin/wallets", dependencies=[Depends(require_admin)])
def admin_wallets(store: WhitelistStore = Depends(get_whitelist_store)):
    return export_wallets(store.load_all())


__all__ = ["router"]
