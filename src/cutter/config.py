from __future__ import annotations
import os
from pathlib import Path

# project root: the directory holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where the per-letter JSON tables live
DATA_DIR = Path(os.environ.get("CUTTER_DATA_DIR", PROJECT_ROOT / "data"))

# default table source, see cutter.DB.api.make_store
DEFAULT_STORE_DSN: str = os.environ.get("CUTTER_STORE", f"json://{DATA_DIR}")

ENCODING: str = "utf-8"

# cutter_table_vowels.json, cutter_table_b.json, ...
PARTITION_FILE_PATTERN: str = "cutter_table_{partition}.json"

# /* ~~~ vowel-leading surnames share one partition ~~~ */
VOWELS = frozenset("AEIOU")
VOWEL_PARTITION: str = "vowels"

# entries shown on each side of the selected one
NEARBY_WINDOW: int = 2

# century (year // 100 + 1) -> letter used in date cutters
CENTURY_LETTERS = {15: "A", 16: "B", 17: "C", 18: "D", 19: "E", 20: "F", 21: "G"}
DEFAULT_CENTURY_LETTER: str = "G"
