"""Public contracts for pbar."""

from pbar.contracts.clock import Clock
from pbar.contracts.config import ReporterConfig, SpeedConfig, SymbolConfig
from pbar.contracts.exceptions import ConfigError, IllegalStateError, InvalidArgumentError, PBarError
from pbar.contracts.listener import NullProgressListener, ProgressListener
from pbar.contracts.renderer import StatusRenderer
from pbar.contracts.status import Status

__all__ = [
    "Clock",
    "ConfigError",
    "IllegalStateError",
    "InvalidArgumentError",
    "NullProgressListener",
    "PBarError",
    "ProgressListener",
    "ReporterConfig",
    "SpeedConfig",
    "Status",
    "StatusRenderer",
    "SymbolConfig",
]
