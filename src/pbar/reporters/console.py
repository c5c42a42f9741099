"""Terminal reporter that redraws a single line in place."""

from __future__ import annotations

from typing import TextIO

from pbar.contracts.listener import ProgressListener
from pbar.contracts.renderer import StatusRenderer
from pbar.contracts.status import Status
from pbar.renderers.console import ConsoleStatusRenderer

BACKSPACE = "\b"
BLANK = " "
ABORTED_MESSAGE = "Aborted!"


class ConsoleReporter(ProgressListener):
    """Writes each rendered status over the previous one.

    Erasing relies on the sink honouring destructive backspace. A file or buffer
    receives the control characters literally; use
    :class:`~pbar.reporters.line.LineReporter` for those.
    """

    def __init__(self, output: TextIO, renderer: StatusRenderer | None = None) -> None:
        self._output = output
        self._renderer = renderer if renderer is not None else ConsoleStatusRenderer()
        self._symbols_to_erase = 0

    @property
    def output(self) -> TextIO:
        return self._output

    @property
    def renderer(self) -> StatusRenderer:
        return self._renderer

    @property
    def symbols_to_erase(self) -> int:
        """Length of the last line written, i.e. what the next redraw must erase."""
        return self._symbols_to_erase

    def on_status(self, status: Status) -> None:
        self.clear_current_line()
        rendered = self._renderer.render(status)
        self._output.write(rendered)
        self._output.flush()
        self._symbols_to_erase = len(rendered)

    def on_finished(self) -> None:
        self.clear_current_line()

    def on_aborted(self) -> None:
        self._output.write(ABORTED_MESSAGE)
        self._output.flush()

    def clear_current_line(self) -> None:
        self._output.write(BACKSPACE * self._symbols_to_erase)
        self._output.write(BLANK * self._symbols_to_erase)
        self._output.write(BACKSPACE * self._symbols_to_erase)
        self._output.flush()
