from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Callable, Iterator

from ..core.constants import DEFAULT_SCAN_COOLDOWN_SECONDS
from ..core.exceptions import ScanIgnored


class ScanDebouncer:
    """Drops scans that arrive while the same input channel is busy.

    A channel is busy while a toggle runs and for ``cooldown_seconds`` after it
    finishes, so a rapid double read of one card cannot toggle a member twice.
    """

    def __init__(self, cooldown_seconds: float = DEFAULT_SCAN_COOLDOWN_SECONDS, *, clock: Callable[[], float] = time.monotonic):
        self._cooldown = float(cooldown_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._busy: set[str] = set()
        self._ready_at: dict[str, float] = {}

    def is_busy(self, channel: str) -> bool:
        with self._lock:
            return channel in self._busy or self._clock() < self._ready_at.get(channel, 0.0)

    @contextmanager
    def hold(self, channel: str) -> Iterator[None]:
        with self._lock:
            if channel in self._busy or self._clock() < self._ready_at.get(channel, 0.0):
                raise ScanIgnored(channel)
            self._busy.add(channel)

        try:
            yield
        finally:
            with self._lock:
                self._busy.discard(channel)
                self._ready_at[channel] = self._clock() + self._cooldown
