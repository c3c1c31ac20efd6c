"""Embedded key-value implementation of :class:`~greetme.core.protocols.SettingsBackend`.

Records live in a single-table SQLite database file: one row per user
name, value is the color.  Each save touches only its own row, so
concurrent writers updating different names do not clobber each other.

This module is the **only** place in the codebase that imports
``sqlite3``.  It is imported lazily in :meth:`KeyValueBackend.open` so
that interpreters built without SQLite report the backend as
unavailable instead of failing at import time.
"""

from __future__ import annotations

import logging
from contextlib import closing
from pathlib import Path
from typing import Any

from greetme.core.models import SettingsMap
from greetme.exceptions import BackendUnavailableError, StorageIOError

logger = logging.getLogger(__name__)

_SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
_SELECT_ALL = "SELECT key, value FROM kv"
_UPSERT = "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)"


def _import_sqlite3() -> Any:
    """Import ``sqlite3`` lazily; a missing module disables the backend."""
    try:
        import sqlite3
    except ModuleNotFoundError as exc:
        raise BackendUnavailableError(
            "sqlite3 is not available in this Python build.",
        ) from exc
    return sqlite3


class KeyValueBackend:
    """Settings store backed by an embedded SQLite key-value table.

    Do not instantiate directly; use :meth:`open`, which verifies the
    capability and initializes the database file.
    """

    name: str = "kv"

    def __init__(self, path: Path, sqlite3: Any) -> None:
        self.path: Path = Path(path)
        self._sqlite3 = sqlite3

    @classmethod
    def open(cls, path: Path, *, enabled: bool = True) -> KeyValueBackend:
        """Open (creating if needed) the key-value store at *path*.

        Raises
        ------
        BackendUnavailableError
            When the capability is disabled, ``sqlite3`` is missing,
            *path* is a directory, or the database cannot be initialized.
        """
        if not enabled:
            raise BackendUnavailableError("key-value backend is disabled by configuration.")

        sqlite3 = _import_sqlite3()
        path = Path(path)
        if path.is_dir():
            raise BackendUnavailableError(f"{path} is a directory, expected a database file.")

        backend = cls(path, sqlite3)
        try:
            with closing(backend._connect()) as conn, conn:
                conn.execute(_SCHEMA)
        except (sqlite3.Error, OSError) as exc:
            raise BackendUnavailableError(
                f"Cannot initialize key-value store at {path}: {exc}",
            ) from exc
        return backend

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def load_all(self) -> SettingsMap:
        """Enumerate every record; an empty store yields ``{}``."""
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(_SELECT_ALL).fetchall()
        except (self._sqlite3.Error, OSError) as exc:
            raise StorageIOError(
                f"Cannot read key-value store at {self.path}: {exc}",
            ) from exc
        return {str(key): str(value) for key, value in rows}

    def save(self, name: str, color: str) -> None:
        """Upsert the single record keyed by *name*."""
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(_UPSERT, (name, color))
        except (self._sqlite3.Error, OSError) as exc:
            raise StorageIOError(
                f"Cannot write key-value store at {self.path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _connect(self) -> Any:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return self._sqlite3.connect(str(self.path))
