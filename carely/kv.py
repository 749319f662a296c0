# -*- coding: utf-8 -*-
"""Key-value backends holding flat JSON blobs.

Repositories receive one of these instead of reaching for global state:
``MemoryStore`` for tests and demos, ``SQLiteStore`` for deployments.
Values must be JSON-serializable; callers always get a fresh copy back.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .app_db import db_conn, init_app_db


class KeyValueStore:
    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def update(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any:
        """Read-modify-write ``key``; returns the stored value."""
        value = fn(self.get(key, default))
        self.set(key, value)
        return value


class MemoryStore(KeyValueStore):
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SQLiteStore(KeyValueStore):
    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        init_app_db(db_path)

    def _read(self, conn, key: str, default: Any) -> Any:
        row = conn.execute("SELECT value_json FROM kv_store WHERE key = ?", (key,)).fetchone()
        if not row:
            return default
        try:
            return json.loads(row["value_json"])
        except ValueError:
            return default

    def _write(self, conn, key: str, value: Any) -> None:
        conn.execute(
            """
            INSERT INTO kv_store (key, value_json, updated_at) VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET value_json = excluded.value_json, updated_at = excluded.updated_at
            """,
            (key, json.dumps(value, ensure_ascii=False), datetime.now(timezone.utc).isoformat()),
        )

    def get(self, key: str, default: Any = None) -> Any:
        with db_conn(self.db_path) as conn:
            return self._read(conn, key, default)

    def set(self, key: str, value: Any) -> None:
        with db_conn(self.db_path) as conn:
            self._write(conn, key, value)

    def delete(self, key: str) -> None:
        with db_conn(self.db_path) as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def update(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any:
        with db_conn(self.db_path) as conn:
            conn.execute("BEGIN IMMEDIATE")
            value = fn(self._read(conn, key, default))
            self._write(conn, key, value)
        return value


def create_store(backend: str, db_path: Optional[Path] = None) -> KeyValueStore:
    if backend == "memory":
        return MemoryStore()
    if backend == "sqlite":
        if db_path is None:
            raise ValueError("SQLite store requires a db_path")
        return SQLiteStore(db_path)
    raise ValueError(f"Unknown storage backend: {backend}")
