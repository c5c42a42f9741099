"""Renderer implementations and factory."""

from pbar.renderers.console import ConsoleStatusRenderer
from pbar.renderers.factory import create_renderer

__all__ = ["ConsoleStatusRenderer", "create_renderer"]
