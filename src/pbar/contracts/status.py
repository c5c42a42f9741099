"""Immutable progress snapshot."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

from pbar.contracts.exceptions import InvalidArgumentError

MAX_PERCENTS = 100

_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "done_percent": (int,),
    "todo_percent": (int,),
    "time_elapsed": (int, float),
}


class Status(BaseModel):
    """Percent done, percent remaining and seconds elapsed at one instant.

    Instances are frozen and ordered by ``(done_percent, todo_percent, time_elapsed)``,
    so two snapshots with the same three values compare equal and sort together.
    """

    done_percent: int
    todo_percent: int
    time_elapsed: float

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name, types in _FIELD_TYPES.items():
            value = data.get(name)
            if value is None:
                raise InvalidArgumentError(f"{name} is required")
            if isinstance(value, bool) or not isinstance(value, types):
                raise InvalidArgumentError(f"{name} must be a number of type {types[-1].__name__}, got {value!r}")
            if value < 0:
                raise InvalidArgumentError(f"{name} must not be negative, got {value!r}")
        return data

    def comparable_fields(self) -> tuple[int, int, float]:
        return (self.done_percent, self.todo_percent, self.time_elapsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.comparable_fields() == other.comparable_fields()

    def __hash__(self) -> int:
        return hash(self.comparable_fields())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.comparable_fields() < other.comparable_fields()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.comparable_fields() <= other.comparable_fields()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.comparable_fields() > other.comparable_fields()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.comparable_fields() >= other.comparable_fields()

    def speed(self, units_per_percent: float = 1) -> float:
        """Units processed per second, given how many units one percent represents."""
        if units_per_percent is None or units_per_percent <= 0:
            raise InvalidArgumentError(f"units_per_percent must be positive, got {units_per_percent!r}")
        if self.time_elapsed <= 0:
            raise InvalidArgumentError("speed is undefined before any time has elapsed")
        return self.done_percent * units_per_percent / self.time_elapsed
