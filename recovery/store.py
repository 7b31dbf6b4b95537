"""
Storage for outstanding password reset codes.

The registry only talks to the :class:`ResetStore` protocol so the in-memory
implementation below can be replaced by a shared keyed store (for example one
with native TTL support) without touching the reset flow.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Optional, Protocol


@dataclass(frozen=True)
class ResetEntry:
    email: str
    code: str
    issued_at: float


class ResetStore(Protocol):
    def get(self, email: str) -> Optional[ResetEntry]:
        ...

    def set(self, entry: ResetEntry) -> None:
        ...

    def prune(self, issued_before: float) -> int:
        """Drop entries issued at or before ``issued_before``; return the count."""
        ...

    def delete(self, email: str, code: Optional[str] = None) -> bool:
        """Remove the entry for ``email``.

        When ``code`` is given the entry is only removed if it still holds
        that code.  Returns True if something was deleted.
        """
        ...


class InMemoryResetStore:
    """Process-local reset code store.  Restarting the process drops all codes."""

    def __init__(self) -> None:
        self._entries: Dict[str, ResetEntry] = {}
        self._lock = threading.Lock()

    def get(self, email: str) -> Optional[ResetEntry]:
        with self._lock:
            return self._entries.get(email)

    def set(self, entry: ResetEntry) -> None:
        with self._lock:
            self._entries[entry.email] = entry

    def delete(self, email: str, code: Optional[str] = None) -> bool:
        with self._lock:
            current = self._entries.get(email)
            if current is None:
                return False
            if code is not None and current.code != code:
                return False
            del self._entries[email]
            return True

    def prune(self, issued_before: float) -> int:
        with self._lock:
            stale = [k for k, e in self._entries.items() if e.issued_at <= issued_before]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
