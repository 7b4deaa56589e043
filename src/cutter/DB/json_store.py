# cutter/DB/json_store.py
from __future__ import annotations
import json
import logging
import os
import re
from typing import Iterable, List

from ..config import ENCODING, PARTITION_FILE_PATTERN
from ..errors import TableUnavailable
from ..models import ReferenceEntry

log = logging.getLogger(__name__)

_FILE_RE = re.compile("^" + re.escape(PARTITION_FILE_PATTERN).replace(r"\{partition\}", r"(\w+)") + "$")


class JsonDirStore:
    """
    Reads the static per-letter tables: one JSON array of
    {"group", "name", "cutter"} objects per partition file.
    """
    def __init__(self, root: str) -> None:
        self.root = os.path.abspath(root)

    def path_for(self, partition: str) -> str:
        return os.path.join(self.root, PARTITION_FILE_PATTERN.format(partition=partition))

    def load_partition(self, partition: str) -> List[ReferenceEntry]:
        path = self.path_for(partition)
        try:
            with open(path, "r", encoding=ENCODING) as f:
                raw = json.load(f)
        except FileNotFoundError:
            raise TableUnavailable(partition, f"not found: {path}") from None
        except (OSError, ValueError) as exc:
            # ValueError covers json.JSONDecodeError and bad encodings
            raise TableUnavailable(partition, str(exc)) from exc
        if not isinstance(raw, list):
            raise TableUnavailable(partition, f"{path} does not hold a JSON array")
        entries = [ReferenceEntry.from_dict(r, partition=partition) for r in raw]
        log.debug("read %s (%d entries)", path, len(entries))
        return entries

    def partitions(self) -> List[str]:
        try:
            names = os.listdir(self.root)
        except OSError:
            return []
        out = []
        for fn in names:
            m = _FILE_RE.match(fn)
            if m:
                out.append(m.group(1))
        return sorted(out)

    def close(self) -> None:
        pass


def write_partition(root: str, partition: str, entries: Iterable[ReferenceEntry]) -> str:
    """Write one partition file (tmp + replace, same as the other writers)."""
    os.makedirs(root, exist_ok=True)
    path = os.path.join(root, PARTITION_FILE_PATTERN.format(partition=partition))
    tmp = f"{path}.tmp"
    with open(tmp, "w", encoding=ENCODING) as f:
        json.dump([e.to_dict() for e in entries], f, ensure_ascii=False, indent=2)
    os.replace(tmp, path)
    return path
