"""Listener implementations and factory."""

from pbar.reporters.console import ConsoleReporter
from pbar.reporters.factory import create_reporter
from pbar.reporters.line import LineReporter
from pbar.reporters.rich import RichProgressListener

__all__ = ["ConsoleReporter", "LineReporter", "RichProgressListener", "create_reporter"]
