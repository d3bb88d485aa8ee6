"""JSON file record stores and their FastAPI dependencies."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generic, Iterator, List, Type, TypeVar

from pydantic import ValidationError as SchemaError
from sqlmodel import SQLModel

from ..models import LeaderboardEntry, WhitelistEntry
from .config import LEADERBOARD_FILE, WALLETS_FILE
from .errors import PersistenceError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)


class JsonRecordStore(Generic[RecordT]):
    """A collection of records kept as one JSON array on disk.

    The whole array is read on every load and rewritten on every save. Read
    failures yield an empty collection and write failures are dropped; both
    are logged.
    """

    def __init__(self, path: Path, model: Type[RecordT]) -> None:
        self.path = Path(path)
        self.model = model
        self._lock = threading.Lock()

    def load_all(self) -> List[RecordT]:
        try:
            return self._read()
        except PersistenceError as exc:
            logger.error("Error loading %s: %s", self.path, exc)
            return []

    def save_all(self, records: List[RecordT]) -> None:
        try:
            self._write(records)
        except PersistenceError as exc:
            logger.error("Error saving %s: %s", self.path, exc)

    @contextmanager
    def transaction(self) -> Iterator[List[RecordT]]:
        """Load the collection, let the caller mutate it, then save it.

        Holds the store lock for the whole cycle. Nothing is saved when the
        body raises.
        """

        with self._lock:
            records = self.load_all()
            yield records
            self.save_all(records)

    def _read(self) -> List[RecordT]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(str(exc)) from exc
        if not isinstance(raw, list):
            raise PersistenceError("expected a JSON array")
        try:
            return [self.model.model_validate(item) for item in raw]
        except SchemaError as exc:
            raise PersistenceError(str(exc)) from exc

    def _write(self, records: List[RecordT]) -> None:
        payload = [
            record.model_dump(mode="json", exclude_none=True) for record in records
        ]
        # Readers outside the lock must never see a truncated file.
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise PersistenceError(str(exc)) from exc


leaderboard_store: JsonRecordStore[LeaderboardEntry] = JsonRecordStore(
    LEADERBOARD_FILE, LeaderboardEntry
)
whitelist_store: JsonRecordStore[WhitelistEntry] = JsonRecordStore(
    WALLETS_FILE, WhitelistEntry
)


def get_leaderboard_store() -> JsonRecordStore[LeaderboardEntry]:
    """FastAPI dependency returning the leaderboard store."""

    return leaderboard_store


def get_whitelist_store() -> JsonRecordStore[WhitelistEntry]:
    """FastAPI dependency returning the whitelist store."""

    return whitelist_store


__all__ = [
    "JsonRecordStore",
    "get_leaderboard_store",
    "get_whitelist_store",
    "leaderboard_store",
    "whitelist_store",
]
