"""Service layer helpers."""

from .addresses import is_valid_address
from .leaderboard import (
    admin_summary,
    query_leaderboard,
    rank_entries,
    submit_entry,
    user_best,
)
from .whitelist import export_wallets, register_wallet

__all__ = [
    "admin_summary",
    "export_wallets",
    "is_valid_address",
    "query_leaderboard",
    "rank_entries",
    "register_wallet",
    "submit_entry",
    "user_best",
]
