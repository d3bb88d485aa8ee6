"""Aggregate API routers."""

from fastapi import APIRouter

from .auth import router as auth_router
from .leaderboard import router as leaderboard_router
from .system import router as system_router
from .whitelist import router as whitelist_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    auth_router,
    whitelist_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
