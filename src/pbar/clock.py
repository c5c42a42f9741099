"""Wall-clock implementation of the clock contract."""

from __future__ import annotations

import time

from pbar.contracts.clock import Clock
from pbar.contracts.exceptions import IllegalStateError


class SystemClock(Clock):
    """Measures elapsed seconds with :func:`time.monotonic`."""

    def __init__(self) -> None:
        self._start_time: float | None = None

    @property
    def start_time(self) -> float | None:
        return self._start_time

    def start(self) -> None:
        self._start_time = time.monotonic()

    def elapsed(self) -> float:
        if self._start_time is None:
            raise IllegalStateError("clock has not been started")
        return time.monotonic() - self._start_time
