"""Progress state machine.

A :class:`Progress` counts completed units against a fixed total and pushes a
:class:`~pbar.contracts.status.Status` to every registered listener on each
increment. It ends in exactly one terminal state, finished or aborted, after
which it refuses further mutation.

Instances are not thread-safe: a single caller is expected to drive
``increment``/``abort``. Guard the instance with a lock if several threads
report against it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from pbar.clock import SystemClock
from pbar.contracts.clock import Clock
from pbar.contracts.exceptions import IllegalStateError, InvalidArgumentError
from pbar.contracts.listener import ProgressListener
from pbar.contracts.status import MAX_PERCENTS, Status
from pbar.reporters.console import ConsoleReporter

_LOG = logging.getLogger(__name__)


class Progress:
    """Tracks done units out of ``total`` and notifies listeners."""

    def __init__(self, total: int, clock: Clock | None = None, *listeners: ProgressListener) -> None:
        if isinstance(total, bool) or not isinstance(total, int) or total <= 0:
            raise InvalidArgumentError(f"total must be a positive integer, got {total!r}")
        self._total = total
        self._clock = clock if clock is not None else SystemClock()
        self._done = 0
        self._listeners: list[ProgressListener] = list(listeners)
        self._finished = False
        self._aborted = False

    @property
    def total(self) -> int:
        return self._total

    @property
    def done(self) -> int:
        return self._done

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def listeners(self) -> list[ProgressListener]:
        """Registered listeners, in notification order."""
        return self._listeners

    def add_listener(self, listener: ProgressListener) -> Progress:
        self._listeners.append(listener)
        return self

    def start(self) -> None:
        """Start the clock. Calling it again resets the elapsed-time baseline."""
        _LOG.debug("Starting progress of %d units", self._total)
        self._clock.start()

    def increment(self, amount: int = 1) -> None:
        """Record ``amount`` more units as done and notify listeners.

        Raises:
            IllegalStateError: The progress is already finished or aborted.
            InvalidArgumentError: ``amount`` is not a positive integer, or would push done past total.

        ``done`` is left unchanged whenever an error is raised before listeners are notified,
        including a clock that cannot report elapsed time.
        """
        self._check_running()
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidArgumentError(f"amount must be a positive integer, got {amount!r}")
        if self._done + amount > self._total:
            raise InvalidArgumentError(
                f"done cannot exceed total ({self._done} + {amount} > {self._total})"
            )
        status = self._status_for(self._done + amount)
        self._done += amount

        for listener in self._listeners:
            listener.on_status(status)

        if self._done == self._total:
            self._finished = True
            _LOG.debug("Progress finished after %.3fs", status.time_elapsed)
            for listener in self._listeners:
                listener.on_finished()

    def abort(self) -> None:
        """Stop the progress early and notify listeners.

        Raises:
            IllegalStateError: The progress is already finished or aborted.
        """
        self._check_running()
        self._aborted = True
        _LOG.debug("Progress aborted at %d/%d units", self._done, self._total)
        for listener in self._listeners:
            listener.on_aborted()

    def percent_done(self) -> float:
        return self._done / self._total * MAX_PERCENTS

    def current_status(self) -> Status:
        return self._status_for(self._done)

    def _status_for(self, done: int) -> Status:
        # Exact integer ceiling of done/total*100, immune to float rounding.
        done_percent = -(-done * MAX_PERCENTS // self._total)
        return Status(
            done_percent=done_percent,
            todo_percent=MAX_PERCENTS - done_percent,
            time_elapsed=self._clock.elapsed(),
        )

    def _check_running(self) -> None:
        if self._finished:
            raise IllegalStateError("progress is already finished")
        if self._aborted:
            raise IllegalStateError("progress is already aborted")


def create_progress(
    total: int,
    clock: Clock | None = None,
    configure: Callable[[Progress], None] | None = None,
    output: TextIO | None = None,
) -> Progress:
    """Create a :class:`Progress`.

    Without ``configure`` a :class:`~pbar.reporters.console.ConsoleReporter` writing
    to ``output`` (standard output by default) is attached. Otherwise ``configure``
    receives the new instance and is responsible for registering listeners.
    """
    instance = Progress(total, clock)
    if configure is None:
        instance.add_listener(ConsoleReporter(output if output is not None else sys.stdout))
    else:
        configure(instance)
    return instance
