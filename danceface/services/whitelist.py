"""Wallet whitelist signup and export helpers."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError as SchemaError

from ..core.errors import ValidationError
from ..core.time import as_utc, utcnow
from ..models import WhitelistEntry
from .addresses import is_valid_address


def register_wallet(
    entries: List[WhitelistEntry],
    address: Optional[str],
    email: Optional[str] = None,
    twitter: Optional[str] = None,
    now: Optional[datetime] = None,
) -> WhitelistEntry:
    """Append a signup to ``entries``; returns the new entry."""

    if not address:
        raise ValidationError("Wallet address is required")
    if not is_valid_address(address):
        raise ValidationError("invalid address format")

    wanted = address.lower()
    if any(entry.address.lower() == wanted for entry in entries):
        raise ValidationError("This wallet is already whitelisted!")

    try:
        entry = WhitelistEntry(
            address=address,
            timestamp=as_utc(now or utcnow()),
            email=email or None,
            twitter=twitter or None,
        )
    except SchemaError as exc:
        field = exc.errors()[0]["loc"][0] if exc.errors() else "entry"
        raise ValidationError(f"invalid {field}") from exc
    entries.append(entry)
    return entry


def export_wallets(entries: Iterable[WhitelistEntry]) -> Dict[str, Any]:
    wallets = list(entries)
    return {
        "wallets": wallets,
        "total": len(wallets),
        "exportData": "\n".join(entry.address for entry in wallets),
    }


__all__ = ["export_wallets", "register_wallet"]
