"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pbar.contracts.status import Status


class StatusRenderer(ABC):
    @abstractmethod
    def render(self, status: Status) -> str: ...  # pragma: no cover
