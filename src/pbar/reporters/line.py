"""Append-only reporter for sinks that cannot redraw."""

from __future__ import annotations

from typing import TextIO

from pbar.contracts.listener import ProgressListener
from pbar.contracts.renderer import StatusRenderer
from pbar.contracts.status import Status
from pbar.renderers.console import ConsoleStatusRenderer
from pbar.reporters.console import ABORTED_MESSAGE


class LineReporter(ProgressListener):
    """Writes one line per status. Suited to log files and CI output."""

    def __init__(self, output: TextIO, renderer: StatusRenderer | None = None) -> None:
        self._output = output
        self._renderer = renderer if renderer is not None else ConsoleStatusRenderer()

    def on_status(self, status: Status) -> None:
        self._output.write(self._renderer.render(status) + "\n")
        self._output.flush()

    def on_finished(self) -> None:
        pass

    def on_aborted(self) -> None:
        self._output.write(ABORTED_MESSAGE + "\n")
        self._output.flush()
