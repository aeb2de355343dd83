"""Request pacing and retry budget shared by every client in the process.

A :class:`RequestGate` owns two pieces of mutable state:

``next slot``
    The earliest moment the next request may be dispatched.  Each call to
    :meth:`RequestGate.wait_turn` reserves the current slot and pushes the
    next one ``min_interval`` seconds further, so requests are spaced out
    even when several threads or clients share the gate.

``failure counter``
    The number of consecutive transient failures.  Any success resets it,
    so the budget applies to a run of failures, not to a single call.

By default all :class:`~eksi.client.Eksi` instances share the gate returned
by :func:`shared_gate`.  Pass an explicit gate to isolate a client.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable

from eksi.config import settings
from eksi.errors import MaxRetriesExceeded

logger = logging.getLogger(__name__)


class RequestGate:
    """Serialises request dispatch and tracks consecutive transient failures."""

    def __init__(
        self,
        min_interval: float | None = None,
        cooldown: float | None = None,
        max_retries: int | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.min_interval = settings.rate_limit_delay if min_interval is None else min_interval
        self.cooldown = settings.retry_cooldown if cooldown is None else cooldown
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._next_slot: float | None = None
        self._failures = 0

    @property
    def failures(self) -> int:
        """Consecutive transient failures since the last success."""
        with self._lock:
            return self._failures

    def wait_turn(self) -> None:
        """Block until this caller may dispatch a request."""
        with self._lock:
            now = self._clock()
            slot = now if self._next_slot is None else max(now, self._next_slot)
            self._next_slot = slot + self.min_interval
        delay = slot - now
        if delay > 0:
            self._sleep(delay)

    def record_success(self) -> None:
        with self._lock:
            self._failures = 0

    def record_failure(self, url: str, reason: str) -> None:
        """Count a transient failure and wait out the cooldown.

        Raises:
            MaxRetriesExceeded: If the failure pushes the counter past
                ``max_retries``.
        """
        with self._lock:
            self._failures += 1
            failures = self._failures

        if failures > self.max_retries:
            logger.error(
                "eksi.request.failed",
                extra={"url": url, "reason": reason, "failures": failures},
            )
            raise MaxRetriesExceeded(failures, url)

        logger.warning(
            "eksi.request.retry",
            extra={
                "url": url,
                "reason": reason,
                "failures": failures,
                "sleep_for": self.cooldown,
            },
        )
        self._sleep(self.cooldown)


_shared_gate: RequestGate | None = None
_shared_lock = threading.Lock()


def shared_gate() -> RequestGate:
    """Return the process-wide gate, creating it from ``settings`` on first use."""
    global _shared_gate
    with _shared_lock:
        if _shared_gate is None:
            _shared_gate = RequestGate()
        return _shared_gate
