from .local_storage import LocalStorage
from .level_store import LevelStore

__all__ = ["LocalStorage", "LevelStore"]
