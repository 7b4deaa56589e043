# cutter/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..errors import TableUnavailable
from ..models import ReferenceEntry


class MemoryStore:
    """Simple in-memory partitions (useful for tests or ephemeral runs)."""
    def __init__(self, seed: Optional[Mapping[str, Sequence[ReferenceEntry]]] = None) -> None:
        self._parts: Dict[str, List[ReferenceEntry]] = {}
        if seed:
            for pid, entries in seed.items():
                self._parts[pid] = list(entries)

    def put_partition(self, partition: str, entries: Iterable[ReferenceEntry]) -> int:
        self._parts[partition] = list(entries)
        return len(self._parts[partition])

    def load_partition(self, partition: str) -> List[ReferenceEntry]:
        try:
            return list(self._parts[partition])
        except KeyError:
            raise TableUnavailable(partition, "no such partition in memory store") from None

    def partitions(self) -> List[str]:
        return sorted(self._parts)

    def close(self) -> None:
        self._parts.clear()
