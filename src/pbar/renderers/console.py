"""Bracketed text-bar renderer."""

from __future__ import annotations

from collections.abc import Mapping

from pbar.contracts.exceptions import InvalidArgumentError
from pbar.contracts.renderer import StatusRenderer
from pbar.contracts.status import Status

DEFAULT_SYMBOLS: Mapping[str, str] = {"done": "#", "todo": " "}


class ConsoleStatusRenderer(StatusRenderer):
    """Renders ``[###   ]`` with one glyph per percent, plus an optional speed suffix."""

    def __init__(self, symbols: Mapping[str, str] | None = None) -> None:
        self._symbols: dict[str, str] = dict(DEFAULT_SYMBOLS)
        self._unit_name: str | None = None
        self._units_per_percent: float | None = None
        if symbols is not None:
            self.use_symbols(symbols)

    @property
    def symbols(self) -> dict[str, str]:
        return dict(self._symbols)

    @property
    def shows_speed(self) -> bool:
        return self._unit_name is not None

    def render(self, status: Status) -> str:
        bar = self._symbols["done"] * status.done_percent + self._symbols["todo"] * status.todo_percent
        rendered = f"[{bar}]"
        if self._unit_name is None:
            return rendered
        rate = status.speed(self._units_per_percent)
        return f"{rendered} {rate:.2f} {self._unit_name}/s"

    def show_speed(self, unit_name: str, units_per_percent: float) -> ConsoleStatusRenderer:
        """Append ``<rate> <unit_name>/s`` to every rendered bar."""
        if unit_name is None or units_per_percent is None:
            raise InvalidArgumentError("show_speed requires both unit_name and units_per_percent")
        self._unit_name = unit_name
        self._units_per_percent = units_per_percent
        return self

    def use_symbols(self, custom_symbols: Mapping[str, str]) -> ConsoleStatusRenderer:
        """Override the ``done`` and/or ``todo`` glyphs, keeping any not supplied."""
        unknown = set(custom_symbols) - set(DEFAULT_SYMBOLS)
        if unknown:
            raise InvalidArgumentError(f"unknown symbol keys: {', '.join(sorted(unknown))}")
        self._symbols.update(custom_symbols)
        return self
