from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from .config import CENTURY_LETTERS, DEFAULT_CENTURY_LETTER
from .errors import CutterError, UnknownWorkType
from .models import CompositionResult, ResolutionResult, WorkType

log = logging.getLogger(__name__)

Lookup = Callable[[str], ResolutionResult]

# /* ~~~ where the variable segment comes from ~~~ */
_TITLE = "title"
_EDITOR = "editor"
_EDITOR_OR_YEAR = "editor-or-year"

# work type -> (fixed prefix segment, variable segment source)
RULES: Dict[WorkType, Tuple[Optional[str], Optional[str]]] = {
    WorkType.SPECIFIC_TITLE: (None, _TITLE),
    WorkType.BIOGRAPHY_CRITICISM: ("Z5", _EDITOR),
    WorkType.AUTOBIOGRAPHY_LITERARY: ("Z5", _TITLE),
    WorkType.AUTOBIOGRAPHY_NONLITERARY: ("A1", None),
    WorkType.COLLECTED_ESSAYS: ("A16", _EDITOR_OR_YEAR),
    WorkType.COLLECTED_POEMS: ("A17", _EDITOR_OR_YEAR),
    WorkType.COLLECTED_NOVELS: ("A15", _EDITOR_OR_YEAR),
    WorkType.COLLECTED_PLAYS: ("A19", _EDITOR_OR_YEAR),
    WorkType.CORRESPONDENCE: ("A14", _EDITOR_OR_YEAR),
    WorkType.SELECTED_WORKS: ("A6", _EDITOR_OR_YEAR),
}


def year_code(year: int) -> str:
    """
    Date cutter for a publication year: century letter + last two digits.

        >>> year_code(1987)
        'F87'

    Centuries outside 15..21 all fall back to "G".
    """
    year = int(year)
    century = year // 100 + 1
    letter = CENTURY_LETTERS.get(century, DEFAULT_CENTURY_LETTER)
    return f"{letter}{year % 100:02d}"


def parse_work_type(value: Union[WorkType, str]) -> WorkType:
    if isinstance(value, WorkType):
        return value
    try:
        return WorkType(str(value).strip())
    except ValueError:
        raise UnknownWorkType(str(value)) from None


def _sub_lookup(lookup: Lookup, text: str) -> Optional[ResolutionResult]:
    """Resolve `text`; a failure drops the segment instead of failing the request."""
    try:
        return lookup(text)
    except CutterError as exc:
        log.debug("sub-lookup for %r dropped: %s", text, exc.message)
        return None


def compose(category: Union[WorkType, str],
            title: Optional[str] = None,
            editor_name: Optional[str] = None,
            publication_year: Optional[int] = None,
            *,
            lookup: Lookup) -> CompositionResult:
    """
    Build the suffix segments appended to the author cutter of a literary work.

    `lookup` resolves a title or an editor name against the cutter tables
    (partitioned by that string's own first letter). When an editor is given
    the year is ignored; the year only backs up a missing editor.
    """
    wt = parse_work_type(category)
    prefix, source = RULES[wt]
    label = wt.description
    title = (title or "").strip()
    editor_name = (editor_name or "").strip()

    segments: List[str] = []
    explanation: List[str] = []
    if prefix:
        segments.append(prefix)
    lead = f"{label}: .{prefix} + " if prefix else ""

    if source is None:
        explanation.append(f"{label}: Add .{prefix} after author cutter")

    elif source == _TITLE:
        if title:
            res = _sub_lookup(lookup, title)
            if res is not None:
                segments.append(res.code)
                what = f"{lead}title cutter" if lead else "Title cutter"
                explanation.append(f'{what} for "{title}": {res.code}')

    elif editor_name:
        res = _sub_lookup(lookup, editor_name)
        if res is not None:
            segments.append(res.code)
            explanation.append(f'{lead}editor cutter for "{editor_name}": {res.code}')

    elif source == _EDITOR_OR_YEAR and publication_year:
        code = year_code(publication_year)
        segments.append(code)
        explanation.append(f"{lead}date cutter for {publication_year}: {code}")

    return CompositionResult(suffix_segments=segments, explanation=explanation)
