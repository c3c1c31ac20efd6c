"""Tests for the SQLite key-value backend (infra/kv_backend.py).

Coverage:
* ``open`` creates the store; a fresh store is empty.
* Per-record upsert semantics.
* ``open`` fails with ``BackendUnavailableError`` when disabled, when
  ``sqlite3`` is missing, or when the path is unusable.
* Read/write failures after opening raise ``StorageIOError``.
"""

from __future__ import annotations

import sqlite3
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from greetme.exceptions import BackendUnavailableError, StorageIOError
from greetme.infra.kv_backend import KeyValueBackend


# ---------------------------------------------------------------------------
# open
# ---------------------------------------------------------------------------

class TestOpen:
    def test_creates_database_file(self, kv_path: Path) -> None:
        KeyValueBackend.open(kv_path)
        assert kv_path.is_file()

    def test_fresh_store_is_empty(self, kv_path: Path) -> None:
        assert KeyValueBackend.open(kv_path).load_all() == {}

    def test_disabled_raises(self, kv_path: Path) -> None:
        with pytest.raises(BackendUnavailableError, match="disabled"):
            KeyValueBackend.open(kv_path, enabled=False)
        assert not kv_path.exists()

    def test_missing_sqlite3_raises(
        self, kv_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setitem(sys.modules, "sqlite3", None)
        with pytest.raises(BackendUnavailableError, match="sqlite3"):
            KeyValueBackend.open(kv_path)

    def test_directory_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(BackendUnavailableError, match="directory"):
            KeyValueBackend.open(tmp_path)

    def test_non_database_file_raises(self, kv_path: Path) -> None:
        kv_path.write_bytes(b"this is definitely not a sqlite database" * 10)
        with pytest.raises(BackendUnavailableError, match="Cannot initialize"):
            KeyValueBackend.open(kv_path)

    def test_backend_name(self, kv_path: Path) -> None:
        assert KeyValueBackend.open(kv_path).name == "kv"


# ---------------------------------------------------------------------------
# load_all / save
# ---------------------------------------------------------------------------

class TestRecords:
    def test_round_trip(self, kv_path: Path) -> None:
        backend = KeyValueBackend.open(kv_path)
        backend.save("Sam", "red")
        assert backend.load_all() == {"Sam": "red"}

    def test_upsert_overwrites_single_record(self, kv_path: Path) -> None:
        backend = KeyValueBackend.open(kv_path)
        backend.save("Sam", "red")
        backend.save("Ann", "teal")
        backend.save("Sam", "blue")
        assert backend.load_all() == {"Sam": "blue", "Ann": "teal"}

    def test_records_survive_reopen(self, kv_path: Path) -> None:
        KeyValueBackend.open(kv_path).save("Sam", "red")
        assert KeyValueBackend.open(kv_path).load_all() == {"Sam": "red"}

    def test_one_row_per_name(self, kv_path: Path) -> None:
        backend = KeyValueBackend.open(kv_path)
        backend.save("Sam", "red")
        backend.save("Sam", "blue")
        conn = sqlite3.connect(str(kv_path))
        try:
            rows = conn.execute("SELECT key, value FROM kv").fetchall()
        finally:
            conn.close()
        assert rows == [("Sam", "blue")]


# ---------------------------------------------------------------------------
# Failures after open
# ---------------------------------------------------------------------------

class TestRuntimeFailures:
    def test_load_error_is_wrapped(self, kv_path: Path) -> None:
        backend = KeyValueBackend.open(kv_path)
        backend._connect = MagicMock(side_effect=sqlite3.OperationalError("disk I/O error"))  # type: ignore[method-assign]
        with pytest.raises(StorageIOError, match="Cannot read"):
            backend.load_all()

    def test_save_error_is_wrapped(self, kv_path: Path) -> None:
        backend = KeyValueBackend.open(kv_path)
        backend._connect = MagicMock(side_effect=sqlite3.OperationalError("readonly database"))  # type: ignore[method-assign]
        with pytest.raises(StorageIOError, match="Cannot write"):
            backend.save("Sam", "red")
