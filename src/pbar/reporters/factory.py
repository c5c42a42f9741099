"""Reporter factory."""

from __future__ import annotations

import sys
from typing import TextIO

from pbar.contracts.config import ReporterConfig
from pbar.contracts.listener import ProgressListener
from pbar.contracts.renderer import StatusRenderer
from pbar.renderers.console import ConsoleStatusRenderer
from pbar.renderers.factory import create_renderer
from pbar.reporters.console import ConsoleReporter
from pbar.reporters.line import LineReporter


def _configured_renderer(config: ReporterConfig) -> StatusRenderer:
    renderer = create_renderer(config.renderer)
    if isinstance(renderer, ConsoleStatusRenderer):
        renderer.use_symbols({"done": config.symbols.done, "todo": config.symbols.todo})
        if config.speed is not None:
            renderer.show_speed(config.speed.unit_name, config.speed.units_per_percent)
    return renderer


def create_reporter(config: ReporterConfig | None = None, output: TextIO | None = None) -> ProgressListener:
    """Build the listener described by *config*, writing to *output* (standard output by default)."""
    config = config if config is not None else ReporterConfig()
    output = output if output is not None else sys.stdout
    renderer = _configured_renderer(config)
    if config.line_mode:
        return LineReporter(output, renderer)
    return ConsoleReporter(output, renderer)
