"""Data models for leaderboard play sessions."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from ..core.time import as_utc, utcnow

# Optional session metadata accepted on submission and passed through as-is.
METADATA_FIELDS = (
    "combo",
    "accuracy",
    "grade",
    "difficulty",
    "songTitle",
    "perfect",
    "great",
    "good",
    "miss",
)


class LeaderboardEntry(SQLModel):
    """One recorded play session."""

    id: str
    xHandle: str
    walletAddress: str
    score: int
    # Session metadata is stored exactly as submitted.
    combo: Optional[Any] = None
    accuracy: Optional[Any] = None
    grade: Optional[Any] = None
    difficulty: Optional[Any] = None
    songTitle: Optional[Any] = None
    perfect: Optional[Any] = None
    great: Optional[Any] = None
    good: Optional[Any] = None
    miss: Optional[Any] = None
    timestamp: datetime = Field(default_factory=utcnow)

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class RankedEntry(LeaderboardEntry):
    """Leaderboard entry with its derived position in a ranked view."""

    rank: int


__all__ = ["METADATA_FIELDS", "LeaderboardEntry", "RankedEntry"]
