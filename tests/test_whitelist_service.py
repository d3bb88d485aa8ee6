from __future__ import annotations

import pytest

from danceface.core.errors import ValidationError
from danceface.services.whitelist import export_wallets, register_wallet
from factories import NOW, wallet


def test_register_appends_with_server_timestamp():
    entries = []

    entry = register_wallet(entries, wallet(1), email="a@example.com", now=NOW)

    assert entries == [entry]
    assert entry.timestamp == NOW
    assert entry.twitter is None


def test_register_rejects_bad_address_and_bad_fields():
    with pytest.raises(ValidationError, match="invalid address format"):
        register_wallet([], "xyz123")
    with pytest.raises(ValidationError, match="invalid email"):
        register_wallet([], wallet(1), email=["not", "a", "string"])


def test_export_lists_addresses_in_signup_order():
    entries = []
    register_wallet(entries, wallet(2), now=NOW)
    register_wallet(entries, wallet(1), now=NOW)

    exported = export_wallets(entries)

    assert exported["total"] == 2
    assert exported["exportData"] == f"{wallet(2)}\n{wallet(1)}"
    assert exported["wallets"] == entries
