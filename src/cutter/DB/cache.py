# cutter/DB/cache.py
from __future__ import annotations
from typing import Dict, List, Optional

from ..models import ReferenceEntry


class PartitionCache:
    """
    Partition id -> loaded entries. Append-only for the life of the owner:
    no eviction and no invalidation, the tables are static. Storing the same
    partition twice just overwrites it with identical data.
    """
    def __init__(self) -> None:
        self._parts: Dict[str, List[ReferenceEntry]] = {}

    def get(self, partition: str) -> Optional[List[ReferenceEntry]]:
        return self._parts.get(partition)

    def put(self, partition: str, entries: List[ReferenceEntry]) -> None:
        self._parts[partition] = entries

    def __contains__(self, partition: object) -> bool:
        return partition in self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def clear(self) -> None:
        self._parts.clear()
