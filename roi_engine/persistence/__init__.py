from .base import PersistenceAdapter, PersistenceError
from .json_file import JsonFileAdapter
from .memory import InMemoryAdapter

__all__ = ["PersistenceAdapter", "PersistenceError", "JsonFileAdapter", "InMemoryAdapter"]
