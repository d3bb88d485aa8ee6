"""Wallet address format checks."""

from __future__ import annotations

import re
from typing import Any

# Taproot/segwit (mainnet and testnet) or legacy P2PKH/P2SH prefix, then the body.
_ADDRESS_RE = re.compile(
    r"(?:bc1[pq]|tb1[pq]|[13])[a-z0-9]{25,62}",
    re.IGNORECASE,
)


def is_valid_address(address: Any) -> bool:
    """Return True when ``address`` looks like a supported wallet address."""

    if not isinstance(address, str):
        return False
    return _ADDRESS_RE.fullmatch(address) is not None


__all__ = ["is_valid_address"]
