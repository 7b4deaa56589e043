"""
Cutter Number Engine

Computes Library of Congress style cutter numbers for catalog items from an
author's surname (or a title, for literary works) using precomputed,
letter-partitioned alphabetical tables, and applies the literature suffix
rules (biography, collected works, correspondence, ...).

The package is split the same way the work is:
- resolver: predecessor selection over one sorted partition
- composer: literature suffix segments and date cutters
- engine:   table stores + partition cache + item-level call numbers
- DB:       JSON / SQLite / in-memory table stores

Example Usage:
    from cutter import Engine

    eng = Engine(dsn="json:///path/to/data")
    res = eng.lookup("Thompson")
    print(res.code, res.explanation)

    call = eng.generate("literature-p", "Thompson",
                        work_type="collected-poems", year=1987)
    print(call.code)        # e.g. "T36.A17.F87"
"""

# src/cutter/__init__.py
from .engine import Engine
from .resolver import resolve
from .composer import compose, year_code
from .errors import (
    CutterError,
    EmptyInput,
    NoEntriesForLetter,
    TableUnavailable,
)
from .models import ReferenceEntry, WorkType, ItemType  # re-export

__version__ = "1.0.0"
__all__ = [
    "Engine", "resolve", "compose", "year_code",
    "CutterError", "EmptyInput", "NoEntriesForLetter", "TableUnavailable",
    "ReferenceEntry", "WorkType", "ItemType",
]
