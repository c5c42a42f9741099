"""Renderer factory."""

from __future__ import annotations

from pbar.contracts.exceptions import ConfigError
from pbar.contracts.renderer import StatusRenderer
from pbar.renderers.console import ConsoleStatusRenderer

RENDERERS: dict[str, type[StatusRenderer]] = {"console": ConsoleStatusRenderer}


def create_renderer(name: str, **kwargs: object) -> StatusRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ConfigError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
