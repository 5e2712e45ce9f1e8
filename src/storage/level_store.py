"""Persisted "current level" index."""

from __future__ import annotations

import re

from config import LEVEL_KEY
from storage.local_storage import LocalStorage

# Leading integer, the rest of the string is ignored ("12px" -> 12)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class LevelStore:
    """Reads and writes the level index as a decimal string.

    Reads take the leading integer of the stored text; a missing, negative
    or non-numeric value reads back as level 0.
    """

    def __init__(self, storage: LocalStorage, key: str = LEVEL_KEY) -> None:
        self.storage = storage
        self.key = key

    def read(self) -> int:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return 0
        match = _LEADING_INT.match(raw)
        if match is None:
            return 0
        level = int(match.group(1))
        return level if level >= 0 else 0

    def write(self, level: int) -> None:
        self.storage.set_item(self.key, str(int(level)))


__all__ = ["LevelStore"]
