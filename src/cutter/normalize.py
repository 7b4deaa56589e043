from __future__ import annotations
from .config import VOWELS, VOWEL_PARTITION


def normalize_surname(text: str) -> str:
    """Trimmed, lower-cased form used for every comparison against the table."""
    return text.strip().lower()


def first_letter(text: str) -> str:
    """Upper-cased first character of the trimmed input ('' for blank input)."""
    s = text.strip()
    return s[0].upper() if s else ""


def comparison_key(name: str) -> str:
    """
    Key an entry name is compared on: everything before the first comma,
    trimmed and lower-cased.

        >>> comparison_key("Smith, J.")
        'smith'
    """
    return name.split(",", 1)[0].strip().lower()


def sort_key(name: str) -> str:
    return name.lower()


def partition_for(letter: str) -> str:
    """A/E/I/O/U share the vowels partition; any other letter names its own."""
    letter = letter.upper()
    if letter in VOWELS:
        return VOWEL_PARTITION
    return letter.lower()


def ordinal(n: int) -> str:
    """1 -> '1st', 12 -> '12th', 22 -> '22nd'."""
    n = int(n)
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
