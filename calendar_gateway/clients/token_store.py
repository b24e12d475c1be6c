"""Storage backends for the single persisted credential record."""

from __future__ import annotations

import json
import os
import sqlite3
import tempfile
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, Optional, Protocol


class CredentialStore(Protocol):
    """Anything that can hold one serialized credential record."""

    def get(self) -> Optional[Dict[str, Any]]:
        ...

    def put(self, record: Dict[str, Any]) -> None:
        ...


def _ensure_parent(path: Path) -> None:
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)


class FileCredentialStore:
    """Keep the record as a flat JSON document on disk.

    Writes go to a sibling temporary file which then replaces the target, so
    readers see either the previous record or the new one.
    """

    def __init__(self, token_path: str) -> None:
        self._path = Path(token_path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Optional[Dict[str, Any]]:
        if not self._path.exists():
            return None
        return json.loads(self._path.read_text(encoding="utf-8"))

    def put(self, record: Dict[str, Any]) -> None:
        _ensure_parent(self._path)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(record, handle)
            os.replace(tmp_name, self._path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class SQLiteCredentialStore:
    """Keep the record in a one-row SQLite table."""

    _RECORD_KEY = "google"

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path)
        _ensure_parent(self._db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with closing(self._connect()) as conn, conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS oauth_tokens (
                    name TEXT PRIMARY KEY,
                    data TEXT NOT NULL
                )
                """
            )

    def get(self) -> Optional[Dict[str, Any]]:
        with closing(self._connect()) as conn, conn:
            row = conn.execute(
                "SELECT data FROM oauth_tokens WHERE name = ?",
                (self._RECORD_KEY,),
            ).fetchone()
        if not row:
            return None
        return json.loads(row["data"])

    def put(self, record: Dict[str, Any]) -> None:
        data_json = json.dumps(record)
        with closing(self._connect()) as conn, conn:
            conn.execute(
                """
                INSERT INTO oauth_tokens (name, data)
                VALUES (?, ?)
                ON CONFLICT(name) DO UPDATE SET data = excluded.data
                """,
                (self._RECORD_KEY, data_json),
            )


__all__ = ["CredentialStore", "FileCredentialStore", "SQLiteCredentialStore"]
