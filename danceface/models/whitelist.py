"""Data model for wallet whitelist signups."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_validator
from sqlmodel import Field, SQLModel

from ..core.time import as_utc, utcnow


class WhitelistEntry(SQLModel):
    """Wallet address registered for the campaign whitelist."""

    address: str
    timestamp: datetime = Field(default_factory=utcnow)
    email: Optional[str] = None
    twitter: Optional[str] = None

    @field_validator("timestamp")
    @classmethod
    def _timestamp_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


__all__ = ["WhitelistEntry"]
