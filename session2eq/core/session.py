"""Console session store.

A session file is an SQLite database. It is deserialized into an in-memory
connection once, switched to read-only, and queried by text with bound
parameters.
"""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


class LoadError(ValueError):
    """Session bytes could not be opened as a database."""


class QueryError(RuntimeError):
    """A query failed inside the database engine."""

    def __init__(self, message, sql=None, params=None):
        super().__init__(message)
        self.sql = sql
        self.params = params


SQLITE_MAGIC = b"SQLite format 3\x00"
WAL_VERSION = 2
LEGACY_VERSION = 1


def _without_wal(data):
    buf = bytearray(data)
    # the in-memory VFS cannot open WAL files; a checkpointed file reads fine as rollback
    if buf.startswith(SQLITE_MAGIC) and len(buf) > 19 and WAL_VERSION in (buf[18], buf[19]):
        buf[18] = LEGACY_VERSION
        buf[19] = LEGACY_VERSION
    return bytes(buf)


class Session:
    def __init__(self, conn):
        self._conn = conn

    def query(self, sql, params=()):
        try:
            cursor = self._conn.execute(sql, params)
            rows = cursor.fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"query failed: {exc}", sql=sql, params=params) from exc
        return [dict(row) for row in rows]

    def fetch(self, record_type, sql, params=()):
        return [record_type.from_row(row) for row in self.query(sql, params)]

    def tables(self):
        rows = self.query(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        )
        return [row["name"] for row in rows]

    def close(self):
        self._conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def load(data):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise LoadError(f"expected session bytes, got {type(data).__name__}")
    if len(data) == 0:
        raise LoadError("session file is empty")

    conn = sqlite3.connect(":memory:")
    try:
        conn.deserialize(_without_wal(data))
        # sqlite only notices a bad header on first read
        conn.execute("SELECT count(*) FROM sqlite_master").fetchone()
        conn.execute("PRAGMA query_only = ON")
    except sqlite3.Error as exc:
        conn.close()
        raise LoadError(f"not a valid session database: {exc}") from exc

    conn.row_factory = sqlite3.Row
    logger.info("loaded session database (%d bytes)", len(data))
    return Session(conn)


def load_path(path):
    p = Path(path).expanduser()
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise LoadError(f"cannot read session file {p}: {exc}") from exc
    return load(data)
