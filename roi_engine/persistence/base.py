from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class PersistenceError(RuntimeError):
    """Stored state exists but cannot be read or written."""


class PersistenceAdapter(ABC):
    """Abstract durable backing for the report store, keyed by namespace."""

    @abstractmethod
    def load(self, namespace: str) -> Optional[dict[str, Any]]:
        """Return the stored state for ``namespace``, or None if nothing was saved."""
        ...

    @abstractmethod
    def save(self, namespace: str, state: dict[str, Any]) -> None:
        """Replace the stored state for ``namespace``."""
        ...
