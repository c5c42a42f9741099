"""Clock contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of elapsed time for a :class:`~pbar.progress.Progress`."""

    @abstractmethod
    def start(self) -> None:
        """Record the current instant as the baseline."""
        ...  # pragma: no cover

    @abstractmethod
    def elapsed(self) -> float:
        """Seconds since :meth:`start`. Raises ``IllegalStateError`` if never started."""
        ...  # pragma: no cover
