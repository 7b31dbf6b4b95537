"""
One-time numeric reset codes keyed by email address.

Codes are six digits drawn uniformly from 100000-999999.  Expiry is checked
lazily against the stored issue time, so there are no timers that could race
with a newer code for the same address.
"""
from __future__ import annotations

import logging
import secrets
import time
from typing import Callable, Optional

from .store import InMemoryResetStore, ResetEntry, ResetStore

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999
DEFAULT_TTL_SECONDS = 10 * 60


def generate_code() -> str:
    """Return a random six digit code."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def normalize_email(email: str) -> str:
    return email.strip().lower()


class ResetCodeRegistry:
    def __init__(
        self,
        store: Optional[ResetStore] = None,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
        code_factory: Callable[[], str] = generate_code,
    ) -> None:
        self.store: ResetStore = store if store is not None else InMemoryResetStore()
        self.ttl_seconds = float(ttl_seconds)
        self.clock = clock
        self.code_factory = code_factory

    def issue(self, email: str) -> str:
        """Create a fresh code for ``email``, replacing any earlier one."""
        key = normalize_email(email)
        code = self.code_factory()
        now = self.clock()
        pruned = self.store.prune(now - self.ttl_seconds)
        if pruned:
            logger.debug("Pruned %d expired reset codes", pruned)
        replaced = self.store.get(key) is not None
        self.store.set(ResetEntry(email=key, code=code, issued_at=now))
        logger.info("Issued reset code for %s (replaced=%s)", key, replaced)
        return code

    def _expired(self, entry: ResetEntry) -> bool:
        return self.clock() >= entry.issued_at + self.ttl_seconds

    def validate(self, email: str, code: str) -> bool:
        """Return True if ``code`` is the live code for ``email``.

        Does not consume the code.  An expired entry is removed, but only if
        it has not been replaced in the meantime.
        """
        key = normalize_email(email)
        entry = self.store.get(key)
        if entry is None:
            return False
        if self._expired(entry):
            self.store.delete(key, code=entry.code)
            logger.info("Reset code for %s expired", key)
            return False
        return secrets.compare_digest(entry.code.encode("utf-8"), str(code).encode("utf-8"))

    def consume(self, email: str) -> None:
        self.store.delete(normalize_email(email))

    def is_pending(self, email: str) -> bool:
        entry = self.store.get(normalize_email(email))
        return entry is not None and not self._expired(entry)
