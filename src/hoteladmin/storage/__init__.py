from .base import KeyValueStorage
from .memory_storage import MemoryKeyValueStorage
from .sqlite_storage import SQLiteKeyValueStorage

__all__ = [
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "SQLiteKeyValueStorage",
]
