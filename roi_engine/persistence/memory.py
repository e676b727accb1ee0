from __future__ import annotations

import copy
from typing import Any, Optional

from .base import PersistenceAdapter


class InMemoryAdapter(PersistenceAdapter):
    """Process-local storage; holds deep copies so callers cannot alias stored state."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}

    def load(self, namespace: str) -> Optional[dict[str, Any]]:
        state = self._data.get(namespace)
        return copy.deepcopy(state) if state is not None else None

    def save(self, namespace: str, state: dict[str, Any]) -> None:
        self._data[namespace] = copy.deepcopy(state)

    def namespaces(self) -> list[str]:
        return sorted(self._data)
