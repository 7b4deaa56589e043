# cutter/DB/sqlite_store.py
from __future__ import annotations
import logging
import os
import sqlite3
from typing import Iterable, List

from ..errors import TableUnavailable
from ..models import ReferenceEntry
from .json_store import JsonDirStore

log = logging.getLogger(__name__)

# `position` keeps the order rows had in their source file so the resolver's
# stable sort sees the same tie order as with the JSON tables.
_SCHEMA = """
CREATE TABLE IF NOT EXISTS partitions (
  id TEXT PRIMARY KEY
);
CREATE TABLE IF NOT EXISTS cutter_entries (
  part TEXT NOT NULL REFERENCES partitions(id),
  position INTEGER NOT NULL,
  grp TEXT NOT NULL,
  name TEXT NOT NULL,
  cutter TEXT NOT NULL,
  PRIMARY KEY (part, position)
);
"""


class SQLiteStore:
    """All partitions in one SQLite file; handy when shipping a single artifact."""
    def __init__(self, db_path: str) -> None:
        self.db_path = os.path.abspath(db_path)
        if not os.path.exists(self.db_path):
            raise TableUnavailable("*", f"not found: {self.db_path}")
        try:
            self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self.conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise TableUnavailable("*", str(exc)) from exc

    @classmethod
    def build_from_json_dir(cls, json_dir: str, db_path: str) -> "SQLiteStore":
        """Import every cutter_table_<partition>.json under json_dir into db_path."""
        src = JsonDirStore(json_dir)
        db_path = os.path.abspath(db_path)
        os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)

        tmp = f"{db_path}.tmp"
        if os.path.exists(tmp):
            os.remove(tmp)
        conn = sqlite3.connect(tmp)
        try:
            conn.executescript(_SCHEMA)
            for pid in src.partitions():
                entries = src.load_partition(pid)
                _insert_partition(conn, pid, entries)
                log.info("imported partition %s (%d entries)", pid, len(entries))
            conn.commit()
        finally:
            conn.close()
        os.replace(tmp, db_path)
        return cls(db_path)

    def put_partition(self, partition: str, entries: Iterable[ReferenceEntry]) -> int:
        self.conn.execute("DELETE FROM cutter_entries WHERE part=?", (partition,))
        n = _insert_partition(self.conn, partition, entries)
        self.conn.commit()
        return n

    def load_partition(self, partition: str) -> List[ReferenceEntry]:
        try:
            known = self.conn.execute("SELECT 1 FROM partitions WHERE id=?", (partition,)).fetchone()
            if known is None:
                raise TableUnavailable(partition, f"no such partition in {self.db_path}")
            rows = self.conn.execute(
                "SELECT grp, name, cutter FROM cutter_entries WHERE part=? ORDER BY position",
                (partition,),
            ).fetchall()
        except sqlite3.Error as exc:
            raise TableUnavailable(partition, str(exc)) from exc
        return [ReferenceEntry(group=g, name=n, cutter=c) for g, n, c in rows]

    def partitions(self) -> List[str]:
        return [r[0] for r in self.conn.execute("SELECT id FROM partitions ORDER BY id")]

    def close(self) -> None:
        self.conn.close()


def _insert_partition(conn: sqlite3.Connection, partition: str, entries: Iterable[ReferenceEntry]) -> int:
    conn.execute("INSERT OR IGNORE INTO partitions(id) VALUES (?)", (partition,))
    rows = [(partition, i, e.group, e.name, e.cutter) for i, e in enumerate(entries)]
    conn.executemany(
        "INSERT OR REPLACE INTO cutter_entries(part, position, grp, name, cutter) VALUES (?,?,?,?,?)",
        rows,
    )
    return len(rows)
