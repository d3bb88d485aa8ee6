from __future__ import annotations

import json
import logging
import threading

import pytest

from danceface.core.storage import JsonRecordStore
from danceface.models import LeaderboardEntry, WhitelistEntry
from danceface.services.leaderboard import submit_entry
from factories import NOW, make_entry, wallet


def test_missing_file_loads_empty(tmp_path):
    store = JsonRecordStore(tmp_path / "nested" / "leaderboard.json", LeaderboardEntry)

    assert store.load_all() == []


def test_save_then_load(tmp_path):
    store = JsonRecordStore(tmp_path / "nested" / "leaderboard.json", LeaderboardEntry)
    entries = [make_entry("a", 10, difficulty="hard"), make_entry("b", 20)]

    store.save_all(entries)

    assert store.load_all() == entries
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert "songTitle" not in raw[0]
    assert raw[0]["timestamp"].startswith("2026-03-31T12:00:00")


def test_reads_entries_written_by_earlier_deploys(tmp_path):
    path = tmp_path / "wallets.json"
    path.write_text(
        json.dumps([{"address": wallet(1), "timestamp": "2024-05-01T10:00:00.000Z"}]),
        encoding="utf-8",
    )

    (entry,) = JsonRecordStore(path, WhitelistEntry).load_all()

    assert entry.address == wallet(1)
    assert entry.timestamp.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("content", ["{not json", '{"an": "object"}', '[{"address": 1}]'])
def test_unreadable_file_fails_open(tmp_path, caplog, content):
    path = tmp_path / "wallets.json"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="danceface.core.storage"):
        assert JsonRecordStore(path, WhitelistEntry).load_all() == []

    assert "Error loading" in caplog.text


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonRecordStore(blocker / "leaderboard.json", LeaderboardEntry)

    with caplog.at_level(logging.ERROR, logger="danceface.core.storage"):
        store.save_all([make_entry("a", 1)])

    assert "Error saving" in caplog.text


def test_transaction_saves_mutations(tmp_path):
    store = JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)

    with store.transaction() as entries:
        entries.append(make_entry("a", 1))

    assert [entry.id for entry in store.load_all()] == ["a"]


def test_transaction_discards_on_error(tmp_path):
    store = JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)
    store.save_all([make_entry("a", 1)])

    with pytest.raises(RuntimeError):
        with store.transaction() as entries:
            entries.append(make_entry("b", 2))
            raise RuntimeError("boom")

    assert [entry.id for entry in store.load_all()] == ["a"]
    assert store.load_all()[0].timestamp == NOW


def test_concurrent_transactions_keep_every_submission(tmp_path):
    store = JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)
    start = threading.Barrier(30)

    def submit(n):
        start.wait()
        with store.transaction() as entries:
            submit_entry(
                entries, {"xHandle": f"@p{n}", "walletAddress": wallet(n), "score": n}
            )

    threads = [threading.Thread(target=submit, args=(n,)) for n in range(30)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    stored = store.load_all()
    assert len(stored) == 30
    assert len({entry.id for entry in stored}) == 30
    assert sorted(entry.score for entry in stored) == list(range(30))


def test_save_replaces_file_without_leaving_temp_files(tmp_path):
    store = JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)
    store.save_all([make_entry("a", 1)])

    store.save_all([make_entry("b", 2), make_entry("c", 3)])

    assert [entry.id for entry in store.load_all()] == ["b", "c"]
    assert [path.name for path in tmp_path.iterdir()] == ["leaderboard.json"]


def test_failed_save_keeps_previous_contents(tmp_path, monkeypatch):
    store = JsonRecordStore(tmp_path / "leaderboard.json", LeaderboardEntry)
    store.save_all([make_entry("a", 1)])

    def refuse(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("danceface.core.storage.os.replace", refuse)
    store.save_all([make_entry("b", 2)])

    assert [entry.id for entry in store.load_all()] == ["a"]
    assert [path.name for path in tmp_path.iterdir()] == ["leaderboard.json"]
