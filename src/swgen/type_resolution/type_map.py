"""Explicit type substitution rules."""

from __future__ import annotations

import threading
from typing import Any

from .resolution_errors import UnsupportedTypeError
from .type_kinds import python_type_name, type_of

_NOT_FOUND = object()


class TypeMap:
    """Rules replacing a source type with another sample before inference."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rules: dict[Any, Any] = {}

    def add(self, source: Any, replacement: Any) -> None:
        """Resolve ``source``'s exact type as if it were ``replacement``."""
        with self._lock:
            self._rules[type_of(source)] = replacement

    def lookup(self, t: Any) -> tuple[bool, Any]:
        """Return ``(found, replacement)`` following mapping chains to their end."""
        seen: list[Any] = []
        current: Any = _NOT_FOUND
        key = t
        while True:
            replacement = self._get(key)
            if replacement is _NOT_FOUND:
                break
            if key in seen:
                chain = " -> ".join(python_type_name(item) for item in [*seen, key])
                raise UnsupportedTypeError(f"Type mapping cycle: {chain}")
            seen.append(key)
            current = replacement
            key = type_of(replacement)
        if current is _NOT_FOUND:
            return False, None
        return True, current

    def _get(self, key: Any) -> Any:
        with self._lock:
            try:
                return self._rules.get(key, _NOT_FOUND)
            except TypeError:
                return _NOT_FOUND

    def __contains__(self, t: Any) -> bool:
        return self._get(t) is not _NOT_FOUND

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)
