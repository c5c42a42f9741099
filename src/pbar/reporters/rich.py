"""Rich-based progress display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn

from pbar.contracts.listener import ProgressListener
from pbar.contracts.status import MAX_PERCENTS, Status


class RichProgressListener(ProgressListener):
    """Live terminal progress bar powered by Rich.

    Use as a context manager so the live display is properly started/stopped::

        with RichProgressListener("Copying") as listener:
            work = Progress(total, None, listener)
            ...
    """

    def __init__(self, description: str = "Working", console: Console | None = None) -> None:
        self._description = description
        self._console = console if console is not None else Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>14}"),
            BarColumn(bar_width=30),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_id = self._progress.add_task(description, total=MAX_PERCENTS)

    @property
    def completed(self) -> float:
        return self._progress.tasks[0].completed

    @property
    def description(self) -> str:
        return self._progress.tasks[0].description

    def __enter__(self) -> RichProgressListener:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def on_status(self, status: Status) -> None:
        self._progress.update(self._task_id, completed=status.done_percent)

    def on_finished(self) -> None:
        self._progress.update(self._task_id, completed=MAX_PERCENTS)

    def on_aborted(self) -> None:
        self._progress.update(self._task_id, description=f"[red]✗[/red] {self._description}")
