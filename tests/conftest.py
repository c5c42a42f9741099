"""Shared test fixtures for pbar tests."""

from __future__ import annotations

import io

import pytest

from pbar.contracts.status import Status
from pbar.progress import Progress
from tests.fakes.clock import FakeClock
from tests.fakes.listener import RecordingListener


@pytest.fixture
def clock() -> FakeClock:
    """A started fake clock reading 10 seconds."""
    fake = FakeClock(elapsed=10.0)
    fake.start()
    return fake


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def sample_status() -> Status:
    return Status(done_percent=50, todo_percent=50, time_elapsed=10.0)


@pytest.fixture
def make_progress(clock: FakeClock, listener: RecordingListener):
    """Factory for a started Progress wired to the shared fake clock and recording listener."""

    def _make(total: int) -> Progress:
        progress = Progress(total, clock, listener)
        progress.start()
        return progress

    return _make
