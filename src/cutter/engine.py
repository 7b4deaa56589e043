# cutter/engine.py
from __future__ import annotations

import logging
from typing import List, Optional, Union

from . import config as CFG
from .composer import compose, parse_work_type
from .errors import EmptyInput, MissingWorkType, NotClassifiable, TableUnavailable, UnknownItemType
from .models import (
    CallNumberResult,
    CompositionResult,
    ItemType,
    ReferenceEntry,
    ResolutionResult,
    WorkType,
)
from .normalize import first_letter, ordinal, partition_for
from .resolver import resolve
from .DB.api import TableStore, make_store
from .DB.cache import PartitionCache

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - a TableStore (JSON directory, SQLite or in-memory) for the partitions,
      - a PartitionCache owned by this engine,
      - the resolver (resolver.resolve) and the literature composer (composer.compose).

    Public API (used by CLI/Flask):
      * lookup(surname):        author cutter for one surname or title
      * compose(work_type, ...): literature suffix segments
      * generate(item_type, author, ...): full call number with steps
      * shutdown():             close underlying resources

    Store DSNs (via cutter.DB.api.make_store):
      - "json:///path/to/data"
      - "sqlite:///path/to/cutter.sqlite"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self, store: Optional[TableStore] = None, *, dsn: Optional[str] = None) -> None:
        if store is None:
            dsn = dsn or CFG.DEFAULT_STORE_DSN
            log.info("Initializing table store: %s", dsn)
            store = make_store(dsn)
        self._store: Optional[TableStore] = store
        self.cache = PartitionCache()

    # ------------- tables -------------

    # /* ~~~ cached partition for the letter; loads it on first use ~~~ */
    def table_for(self, letter: str) -> List[ReferenceEntry]:
        if self._store is None:
            raise RuntimeError("Engine is shut down.")
        pid = partition_for(letter)
        cached = self.cache.get(pid)
        if cached is not None:
            log.info("Using cached cutter table: %s", pid)
            return cached
        try:
            entries = self._store.load_partition(pid)
        except TableUnavailable as exc:
            # nothing cached; the next call tries the store again
            log.error("Error loading cutter table %s: %s", pid, exc.detail or exc.message)
            raise
        self.cache.put(pid, entries)
        log.info("Cutter table loaded: %s (%d entries)", pid, len(entries))
        return entries

    # ------------- query -------------

    def lookup(self, surname: str) -> ResolutionResult:
        if surname is None or not surname.strip():
            raise EmptyInput()
        return resolve(surname, self.table_for(first_letter(surname)))

    def compose(self,
                work_type: Union[WorkType, str],
                title: Optional[str] = None,
                editor: Optional[str] = None,
                year: Optional[int] = None) -> CompositionResult:
        return compose(work_type, title, editor, year, lookup=self.lookup)

    # /* ~~~ item-level entry point: base cutter + edition or literature suffixes ~~~ */
    def generate(self,
                 item_type: Union[ItemType, str],
                 author: str,
                 *,
                 edition: Optional[int] = None,
                 work_type: Union[WorkType, str, None] = None,
                 title: Optional[str] = None,
                 editor: Optional[str] = None,
                 year: Optional[int] = None) -> CallNumberResult:
        it = _parse_item_type(item_type)
        if it is ItemType.MOTION_PICTURE:
            raise NotClassifiable(it.value)

        wt: Optional[WorkType] = None
        if it in (ItemType.LITERATURE, ItemType.AUTOBIOGRAPHY):
            if work_type is None or (isinstance(work_type, str) and not work_type.strip()):
                raise MissingWorkType()
            wt = parse_work_type(work_type)

        if author is None or not author.strip():
            raise EmptyInput("author surname")
        base = self.lookup(author)

        if wt is None:
            return self._standard(it, author, base, edition)
        return self._literature(it, wt, author, base, title, editor, year)

    def _standard(self, it: ItemType, author: str, base: ResolutionResult,
                  edition: Optional[int]) -> CallNumberResult:
        steps = [
            f'Author surname: "{author}"',
            f'First letter: "{base.first_letter}"',
            f"Located in {base.first_letter} section of cutter table",
            *base.explanation,
        ]
        code = base.code
        segments: List[str] = []
        if edition:
            segments.append(str(edition))
            code = f"{code}.{edition}"
            steps.append(f"Added edition number: .{edition} (for {ordinal(edition)} edition)")
        steps.append(f"Final cutter number: {code}")
        extras = {"edition": ordinal(edition) + " edition"} if edition else {}
        return CallNumberResult(code=code, base=base.code, item_type=it, segments=segments,
                                steps=steps, resolution=base, extras=extras)

    def _literature(self, it: ItemType, wt: WorkType, author: str, base: ResolutionResult,
                    title: Optional[str], editor: Optional[str], year: Optional[int]) -> CallNumberResult:
        lit = self.compose(wt, title, editor, year)
        code = base.code
        if lit.suffix_segments:
            code = code + "." + ".".join(lit.suffix_segments)
        steps = [
            f'Author surname: "{author}"',
            f"Base author cutter: {base.code}",
            *base.explanation,
            *lit.explanation,
            f"Final cutter number: {code}",
        ]
        extras = {k: v for k, v in (("title", title), ("editor", editor), ("year", year)) if v}
        return CallNumberResult(code=code, base=base.code, item_type=it, work_type=wt,
                                segments=list(lit.suffix_segments), steps=steps,
                                resolution=base, extras=extras)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            self.cache.clear()
            log.info("Engine shutdown complete")


def _parse_item_type(value: Union[ItemType, str]) -> ItemType:
    if isinstance(value, ItemType):
        return value
    try:
        return ItemType(str(value).strip())
    except ValueError:
        raise UnknownItemType(str(value)) from None
