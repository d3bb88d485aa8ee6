"""Leaderboard endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ...core.security import require_admin
from ...core.storage import JsonRecordStore, get_leaderboard_store
from ...models import LeaderboardEntry, RankedEntry
from ...services.leaderboard import (
    DEFAULT_LIMIT,
    admin_summary,
    query_leaderboard,
    submit_entry,
    user_best,
)

router = APIRouter(tags=["leaderboard"])
logger = logging.getLogger(__name__)

LeaderboardStore = JsonRecordStore[LeaderboardEntry]


@router.post("/api/leaderboard/submit")
def submit_score(
    body: Dict[str, Any], store: LeaderboardStore = Depends(get_leaderboard_store)
):
    """Record a play session and report its rank."""

    with store.transaction() as entries:
        entry, rank = submit_entry(entries, body)
        total = len(entries)

    logger.info(
        "Score %s submitted by %s, rank %s of %s", entry.score, entry.xHandle, rank, total
    )
    return {
        "success": True,
        "message": "Score submitted!",
        "rank": rank,
        "totalEntries": total,
    }


@router.get("/api/leaderboard", response_model=List[RankedEntry])
def get_leaderboard(
    difficulty: Optional[str] = None,
    time_filter: Optional[str] = Query(None, alias="timeFilter"),
    limit: int = Query(DEFAULT_LIMIT, ge=0),
    store: LeaderboardStore = Depends(get_leaderboard_store),
):
    """Ranked leaderboard, optionally filtered by difficulty and time window."""

    return query_leaderboard(store.load_all(), difficulty, time_filter, limit)


@router.get("/api/leaderboard/user/{wallet_address}")
def get_user_best(
    wallet_address: str, store: LeaderboardStore = Depends(get_leaderboard_store)
):
    """Best score, rank and history for one wallet."""

    return user_best(store.load_all(), wallet_address)


@router.get("/api/admin/leaderboard", dependencies=[Depends(require_admin)])
def get_admin_leaderboard(store: LeaderboardStore = Depends(get_leaderboard_store)):
    """Full leaderboard with stats and export data."""

    return admin_summary(store.load_all())


__all__ = ["router"]
