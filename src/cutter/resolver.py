from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .config import NEARBY_WINDOW
from .errors import EmptyInput, NoEntriesForLetter
from .models import Comparison, ReferenceEntry, ResolutionResult
from .normalize import comparison_key, first_letter as _first_letter, normalize_surname, sort_key

log = logging.getLogger(__name__)


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _label(entry: ReferenceEntry, letter: str) -> str:
    return f"{entry.name} ({letter}{entry.cutter})"


def letter_group(table: Iterable[ReferenceEntry], letter: str) -> List[ReferenceEntry]:
    """
    /* ~~~ entries filed under `letter`, sorted case-insensitively by name ~~~ */
    sorted() is stable, so equal names keep their order in the table.
    """
    return sorted((e for e in table if e.group == letter), key=lambda e: sort_key(e.name))


def _select(raw: str, surname: str, letter: str,
            entries: List[ReferenceEntry]) -> Tuple[int, List[str]]:
    """Return (index of the selected entry, explanation lines)."""
    for i, entry in enumerate(entries):
        key = comparison_key(entry.name)
        if surname == key:
            return i, [f"Exact match found: {_label(entry, letter)}"]
        if surname < key:
            if i == 0:
                return i, [f'"{raw}" comes before all entries, using first entry: {_label(entry, letter)}']
            prev = entries[i - 1]
            return i - 1, [
                f'"{raw}" falls between "{prev.name}" and "{entry.name}"',
                f"Using the entry BEFORE the closest match: {_label(prev, letter)}",
            ]
    last = len(entries) - 1
    return last, [f'"{raw}" comes after all entries, using last entry: {_label(entries[last], letter)}']


def _nearby(surname: str, entries: List[ReferenceEntry], idx: int) -> List[Comparison]:
    lo = max(0, idx - NEARBY_WINDOW)
    hi = min(len(entries), idx + NEARBY_WINDOW + 1)
    return [
        Comparison(name=e.name, cutter=e.cutter, comparison=_cmp(surname, comparison_key(e.name)))
        for e in entries[lo:hi]
    ]


def resolve(surname: str, table: Iterable[ReferenceEntry]) -> ResolutionResult:
    """
    Pick the cutter for `surname` from one table partition.

    A name that falls between two entries gets the code of the entry that
    sorts before it, never the following one. A name before every entry
    takes the first entry; a name after every entry takes the last one.

    Raises EmptyInput for blank input and NoEntriesForLetter when the table
    holds nothing filed under the input's first letter.
    """
    if surname is None or not surname.strip():
        raise EmptyInput()
    raw = surname.strip()
    norm = normalize_surname(surname)
    letter = _first_letter(surname)

    entries = letter_group(table, letter)
    if not entries:
        raise NoEntriesForLetter(letter)

    idx, explanation = _select(raw, norm, letter, entries)
    selected = entries[idx]
    log.debug("resolve(%r): %d entries under %s, selected %r", raw, len(entries), letter, selected.name)
    return ResolutionResult(
        code=f"{letter}{selected.cutter}",
        selected_entry=selected,
        explanation=explanation,
        nearby_matches=_nearby(norm, entries, idx),
        first_letter=letter,
    )
