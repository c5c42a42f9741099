"""Public API surface for pbar."""

__version__ = "1.0.0"

from pbar.clock import SystemClock
from pbar.config import load_config
from pbar.contracts.clock import Clock
from pbar.contracts.config import ReporterConfig, SpeedConfig, SymbolConfig
from pbar.contracts.exceptions import ConfigError, IllegalStateError, InvalidArgumentError, PBarError
from pbar.contracts.listener import NullProgressListener, ProgressListener
from pbar.contracts.renderer import StatusRenderer
from pbar.contracts.status import Status
from pbar.progress import Progress, create_progress
from pbar.renderers import ConsoleStatusRenderer, create_renderer
from pbar.reporters import ConsoleReporter, LineReporter, RichProgressListener, create_reporter

__all__ = [
    "Clock",
    "ConfigError",
    "ConsoleReporter",
    "ConsoleStatusRenderer",
    "IllegalStateError",
    "InvalidArgumentError",
    "LineReporter",
    "NullProgressListener",
    "PBarError",
    "Progress",
    "ProgressListener",
    "ReporterConfig",
    "RichProgressListener",
    "SpeedConfig",
    "Status",
    "StatusRenderer",
    "SymbolConfig",
    "SystemClock",
    "create_renderer",
    "create_reporter",
    "load_config",
    "create_progress",
]
