# cutter/errors.py
"""
Error taxonomy for the cutter engine.

Resolver errors are terminal for a call: nothing in the core retries.
The literature composer is the only place that catches CutterError, and
only around its own sub-lookups.
"""
from __future__ import annotations
from typing import Optional


class CutterError(Exception):
    """Base class; `message` is meant to be shown to a cataloguer as-is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class EmptyInput(CutterError):
    def __init__(self, what: str = "surname") -> None:
        super().__init__(f"Please enter a {what} to generate a cutter number.")
        self.what = what


class NoEntriesForLetter(CutterError):
    def __init__(self, letter: str) -> None:
        super().__init__(f'No entries found for letter "{letter}"')
        self.letter = letter


class TableUnavailable(CutterError):
    """The partition could not be obtained; `detail` keeps the transport error text."""

    def __init__(self, partition: str, detail: Optional[str] = None) -> None:
        msg = f"Failed to load cutter table {partition!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.partition = partition
        self.detail = detail


class UnknownWorkType(CutterError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown literature work type: {value!r}")
        self.value = value


class MissingWorkType(CutterError):
    def __init__(self) -> None:
        super().__init__("Please select the type of work.")


class UnknownItemType(CutterError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown item type: {value!r}")
        self.value = value


class NotClassifiable(CutterError):
    def __init__(self, item_type: str) -> None:
        super().__init__(
            "Motion picture DVDs and popular film/TV boxsets are not classified here; "
            "pass them to the CS team."
        )
        self.item_type = item_type


class InvalidYear(CutterError):
    def __init__(self, value: str) -> None:
        super().__init__(f"Publication year must be a whole number, got {value!r}")
        self.value = value
