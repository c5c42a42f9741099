"""Listener contract for progress notifications.

A :class:`~pbar.progress.Progress` calls its listeners synchronously, in
registration order. Implementations drive progress bars, logs, or any other
feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pbar.contracts.status import Status


class ProgressListener(ABC):
    """Observer interface for progress events."""

    @abstractmethod
    def on_status(self, status: Status) -> None:
        """A new snapshot is available after an increment."""
        ...  # pragma: no cover

    @abstractmethod
    def on_finished(self) -> None:
        """All work is done. Called after every ``on_status`` of the final increment."""
        ...  # pragma: no cover

    @abstractmethod
    def on_aborted(self) -> None:
        """The work was aborted before completion."""
        ...  # pragma: no cover


class NullProgressListener(ProgressListener):
    """No-op implementation used when no feedback is requested."""

    def on_status(self, status: Status) -> None:
        pass

    def on_finished(self) -> None:
        pass

    def on_aborted(self) -> None:
        pass
