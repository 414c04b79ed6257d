"""Runtime environment variable store.

This service centralizes reads/writes to the process environment.

Why it exists:
- Accessors and the loader never touch os.environ directly.
- Tests inject a plain dict instead of patching the real process table.

Note: This is intentionally small and synchronous. Every operation is a
single mapping access.
"""

from __future__ import annotations

import os
from collections.abc import MutableMapping


class RuntimeEnvService:
    """Small wrapper around a string mapping (os.environ by default)."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._environ.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._environ[str(key)] = str(value)

    def setdefault(self, key: str, value: str) -> bool:
        """Insert `value` only if `key` is absent. Returns True when inserted."""
        if key in self:
            return False
        self._environ[str(key)] = str(value)
        return True

    def unset(self, key: str) -> None:
        self._environ.pop(str(key), None)

    def __contains__(self, key: object) -> bool:
        return key in self._environ
