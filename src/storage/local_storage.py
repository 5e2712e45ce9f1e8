"""Synchronous string-keyed store that survives restarts.

Values live in memory and are written through to a JSON file on every
change, so reads are cheap enough to do once per frame.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional

from config import STORAGE_PATH


class LocalStorage:
    def __init__(self, path: str = STORAGE_PATH) -> None:
        self.path = path
        self._items: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, ValueError) as e:
            print(f"[Storage] Ignoring unreadable store {self.path}: {e}")
            return {}
        if not isinstance(raw, dict):
            print(f"[Storage] Ignoring malformed store {self.path}: not an object")
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def _flush(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(self._items, fh, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value) -> None:
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()

    def clear(self) -> None:
        self._items.clear()
        self._flush()

    def keys(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items


__all__ = ["LocalStorage"]
