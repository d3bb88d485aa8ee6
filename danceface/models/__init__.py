"""Data model exports."""

from .leaderboard import METADATA_FIELDS, LeaderboardEntry, RankedEntry
from .whitelist import WhitelistEntry

__all__ = [
    "METADATA_FIELDS",
    "LeaderboardEntry",
    "RankedEntry",
    "WhitelistEntry",
]
