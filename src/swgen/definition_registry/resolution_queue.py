"""Pending-resolution queue for deferred definitions."""

from __future__ import annotations

import logging
import threading
from typing import Any

_LOGGER = logging.getLogger("swgen.definitions")


class ResolutionQueue:
    """Types discovered mid-walk whose full expansion is deferred, keyed by definition name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: dict[str, Any] = {}

    def add(self, name: str, sample: Any) -> bool:
        """Queue ``sample`` under ``name``; return False when it was already queued."""
        with self._lock:
            if name in self._pending:
                return False
            self._pending[name] = sample
        _LOGGER.debug("Queued definition %s", name)
        return True

    def contains(self, name: str) -> bool:
        with self._lock:
            return name in self._pending

    def discard(self, name: str) -> None:
        with self._lock:
            self._pending.pop(name, None)

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._pending)

    def reset(self) -> None:
        with self._lock:
            self._pending = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)
