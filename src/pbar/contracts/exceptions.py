"""Exception hierarchy for pbar.

All pbar exceptions inherit from :class:`PBarError`, so callers can catch any
library error with a single ``except`` clause while still handling specific
failure modes.
"""

from __future__ import annotations


class PBarError(Exception):
    """Base exception for all pbar errors."""


class InvalidArgumentError(PBarError):
    """A constructor or method received an out-of-range or missing value."""


class IllegalStateError(PBarError):
    """An operation was attempted in a state that does not allow it."""


class ConfigError(PBarError):
    """Reporter configuration loading or validation failure."""
