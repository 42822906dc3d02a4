"""Optional persistent cache for the tagging engine.

Only the open/close lifecycle exists; nothing is stored in or read from
the cache yet.
"""

from __future__ import annotations

import sqlite3
from types import TracebackType

from .errors import CacheUnavailableError


class CacheStore:
    """Handle to an SQLite-backed cache file."""

    def __init__(self, path: str, conn: sqlite3.Connection):
        self.path = path
        self._conn: sqlite3.Connection | None = conn

    @classmethod
    def open(cls, path: str) -> CacheStore:
        """
        Open (creating if needed) the cache at ``path``.

        Raises:
            CacheUnavailableError: If the file can't be opened as a database.
        """
        try:
            conn = sqlite3.connect(path)
        except (sqlite3.Error, OSError) as e:
            raise CacheUnavailableError(path, str(e)) from e

        try:
            # connect() is lazy; force a read of the database header
            conn.execute("PRAGMA user_version").fetchone()
        except sqlite3.Error as e:
            conn.close()
            raise CacheUnavailableError(path, str(e)) from e

        return cls(path, conn)

    @property
    def closed(self) -> bool:
        return self._conn is None

    def close(self) -> None:
        """Close the cache. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> CacheStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
