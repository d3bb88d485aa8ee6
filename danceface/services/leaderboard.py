"""Leaderboard ranking, filtering and submission helpers.

Every function here is a pure function of the entries passed in plus the
request parameters. Rank is never stored: each ranked view sorts the entries
again by score (descending), then timestamp (descending, newer first), with
the original collection order breaking any remaining ties.
"""

from __future__ import annotations

import calendar
import csv
import io
import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError as SchemaError

from ..core.errors import ValidationError
from ..core.time import as_utc, utcnow
from ..models import METADATA_FIELDS, LeaderboardEntry, RankedEntry
from .addresses import is_valid_address

ALL = "all"
DEFAULT_LIMIT = 100

_FIXED_WINDOWS = {
    "daily": timedelta(days=1),
    "weekly": timedelta(days=7),
}


def ranking_key(entry: LeaderboardEntry) -> Tuple[int, datetime]:
    return entry.score, entry.timestamp


def sort_entries(entries: Iterable[LeaderboardEntry]) -> List[LeaderboardEntry]:
    """Return entries in ranking order. The sort is stable."""

    return sorted(entries, key=ranking_key, reverse=True)


def rank_entries(entries: Iterable[LeaderboardEntry]) -> List[RankedEntry]:
    """Sort entries and attach dense 1-based ranks."""

    return [
        RankedEntry.model_validate({**entry.model_dump(), "rank": position})
        for position, entry in enumerate(sort_entries(entries), start=1)
    ]


def _one_month_before(now: datetime) -> datetime:
    year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def time_filter_cutoff(
    time_filter: Optional[str], now: Optional[datetime] = None
) -> Optional[datetime]:
    """Earliest timestamp kept by ``time_filter``, or None for no cutoff."""

    if time_filter is None or time_filter == ALL:
        return None
    now = as_utc(now or utcnow())
    if time_filter in _FIXED_WINDOWS:
        return now - _FIXED_WINDOWS[time_filter]
    if time_filter == "monthly":
        return _one_month_before(now)
    raise ValidationError("invalid time filter")


def filter_entries(
    entries: Iterable[LeaderboardEntry],
    difficulty: Optional[str] = None,
    time_filter: Optional[str] = None,
    now: Optional[datetime] = None,
) -> List[LeaderboardEntry]:
    cutoff = time_filter_cutoff(time_filter, now)
    wants_difficulty = difficulty is not None and difficulty != ALL
    selected = []
    for entry in entries:
        if wants_difficulty and entry.difficulty != difficulty:
            continue
        if cutoff is not None and entry.timestamp < cutoff:
            continue
        selected.append(entry)
    return selected


def query_leaderboard(
    entries: Iterable[LeaderboardEntry],
    difficulty: Optional[str] = None,
    time_filter: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
    now: Optional[datetime] = None,
) -> List[RankedEntry]:
    """Filter, rank over the filtered set, then keep the first ``limit``."""

    filtered = filter_entries(entries, difficulty, time_filter, now)
    return rank_entries(filtered)[: max(limit, 0)]


def _coerce_score(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationError("score must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValidationError("score must be an integer")


def _new_entry_id(now: datetime, taken: set) -> str:
    millis = int(now.timestamp() * 1000)
    while True:
        candidate = f"{millis:x}-{secrets.token_hex(4)}"
        if candidate not in taken:
            return candidate


def build_entry(
    fields: Mapping[str, Any],
    existing: Iterable[LeaderboardEntry] = (),
    now: Optional[datetime] = None,
) -> LeaderboardEntry:
    """Validate submitted fields and create a new entry.

    ``id`` and ``timestamp`` are always assigned here; values for them in
    ``fields`` are ignored.
    """

    x_handle = fields.get("xHandle")
    wallet = fields.get("walletAddress")
    score = fields.get("score")
    if x_handle is None or wallet is None or score is None:
        raise ValidationError("missing required fields")
    if not is_valid_address(wallet):
        raise ValidationError("invalid address format")
    score = _coerce_score(score)

    now = as_utc(now or utcnow())
    metadata = {
        name: fields[name] for name in METADATA_FIELDS if fields.get(name) is not None
    }
    try:
        return LeaderboardEntry(
            id=_new_entry_id(now, {entry.id for entry in existing}),
            xHandle=x_handle,
            walletAddress=wallet,
            score=score,
            timestamp=now,
            **metadata,
        )
    except SchemaError as exc:
        field = exc.errors()[0]["loc"][0] if exc.errors() else "entry"
        raise ValidationError(f"invalid {field}") from exc


def submit_entry(
    entries: List[LeaderboardEntry],
    fields: Mapping[str, Any],
    now: Optional[datetime] = None,
) -> Tuple[LeaderboardEntry, int]:
    """Append a new entry to ``entries`` and re-sort the list in place.

    Returns the new entry and its 1-based rank. ``entries`` is left untouched
    when validation fails.
    """

    entry = build_entry(fields, entries, now)
    entries.append(entry)
    entries.sort(key=ranking_key, reverse=True)
    rank = next(i for i, item in enumerate(entries, start=1) if item.id == entry.id)
    return entry, rank


def user_best(entries: Iterable[LeaderboardEntry], wallet_address: str) -> Dict[str, Any]:
    """Best entry, game count and full history for one wallet.

    The best entry is the wallet's highest-ranked entry in the global order,
    and its rank is its position in the whole leaderboard.
    """

    wanted = wallet_address.lower()
    mine = [entry for entry in rank_entries(entries) if entry.walletAddress.lower() == wanted]
    if not mine:
        return {"bestScore": None, "totalGames": 0}
    return {"bestScore": mine[0], "totalGames": len(mine), "allScores": mine}


def _distinct_wallets(entries: Iterable[LeaderboardEntry]) -> List[str]:
    seen = set()
    wallets = []
    for entry in entries:
        key = entry.walletAddress.lower()
        if key not in seen:
            seen.add(key)
            wallets.append(entry.walletAddress)
    return wallets


def export_csv(ranked: Iterable[RankedEntry]) -> str:
    """One CSV line per ranked entry, without a header."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for entry in ranked:
        writer.writerow(
            [
                entry.rank,
                entry.xHandle,
                entry.walletAddress,
                entry.score,
                "" if entry.difficulty is None else entry.difficulty,
                "" if entry.songTitle is None else entry.songTitle,
            ]
        )
    return buffer.getvalue().rstrip("\n")


def admin_summary(entries: Iterable[LeaderboardEntry]) -> Dict[str, Any]:
    """Full ranked leaderboard with aggregate stats and export blobs."""

    ranked = rank_entries(entries)
    wallets = _distinct_wallets(ranked)
    return {
        "leaderboard": ranked,
        "stats": {
            "totalEntries": len(ranked),
            "uniqueWallets": len(wallets),
            "highScore": ranked[0].score if ranked else 0,
            "totalGames": len(ranked),
        },
        "exportData": {
            "csv": export_csv(ranked),
            "wallets": "\n".join(wallets),
        },
    }


__all__ = [
    "ALL",
    "DEFAULT_LIMIT",
    "admin_summary",
    "build_entry",
    "export_csv",
    "filter_entries",
    "query_leaderboard",
    "rank_entries",
    "ranking_key",
    "sort_entries",
    "submit_entry",
    "time_filter_cutoff",
    "user_best",
]
