"""Reverse index: which texts produced a given score under a given cipher.

Entries are ``(cipher, score, text)`` triples kept in one SQLite table,
unique on the full triple and indexed on ``(cipher, score)`` so that each
``(cipher, score)`` pair forms a partition that can be read on its own.

Every operation opens its own connection, runs in a single transaction and
closes the connection again; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .errors import StorageError

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS entries (
    id      INTEGER PRIMARY KEY AUTOINCREMENT,
    cipher  TEXT NOT NULL,
    score   TEXT NOT NULL,
    entry   TEXT NOT NULL,
    UNIQUE(cipher, score, entry)
);
CREATE INDEX IF NOT EXISTS idx_entries_partition ON entries(cipher, score);
"""


def partition_key(cipher_name: str, score: int) -> Tuple[str, str]:
    """Key of the partition holding texts for ``score`` under ``cipher_name``.

    Scores are kept as decimal text so that values beyond 64 bits still
    address their own partition.
    """
    return (cipher_name, str(int(score)))


class ReverseIndex:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            with closing(sqlite3.connect(str(self.path))) as conn:
                with conn:
                    conn.executescript(_SCHEMA)
                    yield conn
        except sqlite3.Error as e:
            raise StorageError(f"reverse index {self.path}: {e}") from e

    def record(self, cipher_name: str, score: int, text: str) -> None:
        cipher, value = partition_key(cipher_name, score)
        with self._connect() as conn:
            cur = conn.execute(
                "INSERT OR IGNORE INTO entries (cipher, score, entry) VALUES (?, ?, ?)",
                (cipher, value, text),
            )
        logger.debug(
            "record %r under %s=%s (%s)",
            text, cipher, value, "new" if cur.rowcount else "already known",
        )

    def query(self, cipher_name: str, score: int) -> List[str]:
        """All texts recorded for the partition, in ascending code point order.

        A partition nothing was ever recorded in yields an empty list.
        """
        cipher, value = partition_key(cipher_name, score)
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT entry FROM entries WHERE cipher = ? AND score = ?",
                (cipher, value),
            ).fetchall()
        return sorted(row[0] for row in rows)

    def __repr__(self) -> str:
        return f"ReverseIndex(path={self.path!s})"
