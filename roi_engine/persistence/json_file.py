"""JSON-file persistence: one ``<namespace>.json`` file per namespace."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from .base import PersistenceAdapter, PersistenceError

logger = logging.getLogger(__name__)

# Envelope version of the stored file, not the store's mutation counter.
STORAGE_FORMAT_VERSION = 0


class JsonFileAdapter(PersistenceAdapter):
    """Stores state as ``{"state": ..., "version": 0}`` in ``directory``."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, namespace: str) -> Path:
        if not namespace or "/" in namespace or "\\" in namespace or namespace.startswith("."):
            raise ValueError(f"Invalid namespace: {namespace!r}")
        return self.directory / f"{namespace}.json"

    def load(self, namespace: str) -> Optional[dict[str, Any]]:
        path = self.path_for(namespace)
        if not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Cannot read {path}: {e}") from e

        if not isinstance(raw, dict) or not isinstance(raw.get("state"), dict):
            raise PersistenceError(f"Unexpected layout in {path}: missing 'state' object")
        return raw["state"]

    def save(self, namespace: str, state: dict[str, Any]) -> None:
        path = self.path_for(namespace)
        payload = {"state": state, "version": STORAGE_FORMAT_VERSION}

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{namespace}.", suffix=".tmp", dir=self.directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"Cannot write {path}: {e}") from e

        logger.debug("Saved namespace %s to %s", namespace, path)
