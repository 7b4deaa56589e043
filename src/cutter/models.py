# cutter/models.py
"""
Data models for the cutter engine.

- ReferenceEntry: one named point of a partitioned alphabetical table.
- Comparison: one row of the "nearby matches" audit window.
- ResolutionResult / CompositionResult / CallNumberResult: per-query results.
- WorkType / ItemType: the closed enumerations the rules dispatch on.

These classes carry no business logic beyond parsing and simple
formatting helpers.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from .errors import TableUnavailable


@dataclass(frozen=True, slots=True)
class ReferenceEntry:
    """
    One entry of a cutter table partition.

    Attributes
    ----------
    group : str
        Upper-case first letter the entry is filed under. The vowels
        partition mixes groups A, E, I, O and U.
    name : str
        Display name as printed in the table, e.g. "Thomas, J.".
    cutter : str
        Code emitted after the group letter, e.g. "36".
    """
    group: str
    name: str
    cutter: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], *, partition: str = "?") -> "ReferenceEntry":
        try:
            group, name, cutter = raw["group"], raw["name"], raw["cutter"]
        except (KeyError, TypeError) as exc:
            raise TableUnavailable(partition, f"malformed entry {raw!r}") from exc
        if not all(isinstance(v, str) for v in (group, name, cutter)):
            raise TableUnavailable(partition, f"malformed entry {raw!r}")
        return cls(group=group, name=name, cutter=cutter)

    def to_dict(self) -> dict:
        return asdict(self)


ReferenceTable = Sequence[ReferenceEntry]


@dataclass(frozen=True, slots=True)
class Comparison:
    name: str
    cutter: str
    comparison: int   # -1 / 0 / 1: input sorts before / equal / after this entry


@dataclass(frozen=True)
class ResolutionResult:
    code: str                            # first_letter + selected_entry.cutter
    selected_entry: ReferenceEntry
    explanation: List[str]
    nearby_matches: List[Comparison]
    first_letter: str

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "selected_entry": self.selected_entry.to_dict(),
            "explanation": list(self.explanation),
            "nearby_matches": [asdict(m) for m in self.nearby_matches],
        }


@dataclass(frozen=True)
class CompositionResult:
    suffix_segments: List[str]
    explanation: List[str]

    def to_dict(self) -> dict:
        return asdict(self)


class WorkType(str, Enum):
    """Literature work categories; the value is the wire name."""

    SPECIFIC_TITLE = "specific-title"
    BIOGRAPHY_CRITICISM = "biography-criticism"
    AUTOBIOGRAPHY_LITERARY = "autobiography-literary"
    AUTOBIOGRAPHY_NONLITERARY = "autobiography-nonliterary"
    COLLECTED_ESSAYS = "collected-essays"
    COLLECTED_POEMS = "collected-poems"
    COLLECTED_NOVELS = "collected-novels"
    COLLECTED_PLAYS = "collected-plays"
    CORRESPONDENCE = "correspondence"
    SELECTED_WORKS = "selected-works"

    @property
    def description(self) -> str:
        return _WORK_TYPE_DESCRIPTIONS[self]


_WORK_TYPE_DESCRIPTIONS = {
    WorkType.SPECIFIC_TITLE: "Specific Title by an Author",
    WorkType.BIOGRAPHY_CRITICISM: "Biography or Criticism of an Author",
    WorkType.AUTOBIOGRAPHY_LITERARY: "Autobiography of a Literary Person",
    WorkType.AUTOBIOGRAPHY_NONLITERARY: "Autobiography of a Non-Literary Person",
    WorkType.COLLECTED_ESSAYS: "Collected Essays/Prose/Interviews",
    WorkType.COLLECTED_POEMS: "Collected Poems",
    WorkType.COLLECTED_NOVELS: "Collected Novels/Stories",
    WorkType.COLLECTED_PLAYS: "Collected Plays",
    WorkType.CORRESPONDENCE: "Correspondence/Journals/Diaries",
    WorkType.SELECTED_WORKS: "Selected Works (Plays/Novels/Poems)",
}


class ItemType(str, Enum):
    STANDARD = "standard"
    LITERATURE = "literature-p"
    AUTOBIOGRAPHY = "autobiography"
    MOTION_PICTURE = "motion-picture"


@dataclass(frozen=True)
class CallNumberResult:
    """
    The item-level result returned by Engine.generate().

    `base` is the author cutter alone; `code` is the final call number
    suffix with edition or literature segments joined by dots.
    """
    code: str
    base: str
    item_type: ItemType
    segments: List[str]
    steps: List[str]
    resolution: ResolutionResult
    work_type: Optional[WorkType] = None
    extras: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "base": self.base,
            "item_type": self.item_type.value,
            "work_type": self.work_type.value if self.work_type else None,
            "work_type_description": self.work_type.description if self.work_type else None,
            "segments": list(self.segments),
            "steps": list(self.steps),
            "resolution": self.resolution.to_dict(),
            **self.extras,
        }
