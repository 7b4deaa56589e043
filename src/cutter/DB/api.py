# cutter/DB/api.py
from __future__ import annotations
from typing import Mapping, Optional, Protocol, Sequence

from ..models import ReferenceEntry


class TableStore(Protocol):
    # Read one partition ("vowels", "b", "c", ...). Raises TableUnavailable
    # when the partition cannot be obtained; an empty list means "no entries".
    def load_partition(self, partition: str) -> list[ReferenceEntry]: ...
    # partitions this store knows about
    def partitions(self) -> list[str]: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str, *, seed: Optional[Mapping[str, Sequence[ReferenceEntry]]] = None) -> TableStore:
    """
    Factory:
      - json:///path/to/dir -> JsonDirStore (one cutter_table_<partition>.json per partition)
      - sqlite:///path      -> SQLiteStore (see SQLiteStore.build_from_json_dir)
      - memory://           -> MemoryStore (seeded from `seed` if given)
    """
    if dsn.startswith("json://"):
        from .json_store import JsonDirStore
        return JsonDirStore(dsn.removeprefix("json://"))

    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        return SQLiteStore(dsn.removeprefix("sqlite:///"))

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore(seed)

    raise ValueError(f"Unsupported store DSN: {dsn}")
