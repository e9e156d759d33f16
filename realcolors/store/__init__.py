from realcolors.store.base import BaseStore
from realcolors.store.file import FileStore
from realcolors.store.memory import MemoryStore

__all__ = ["BaseStore", "FileStore", "MemoryStore"]
