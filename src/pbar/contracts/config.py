"""Reporter configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SymbolConfig(BaseModel):
    done: str = Field(default="#", min_length=1)
    todo: str = Field(default=" ", min_length=1)

    model_config = {"frozen": True}


class SpeedConfig(BaseModel):
    unit_name: str = Field(min_length=1)
    units_per_percent: float = Field(gt=0)

    model_config = {"frozen": True}


class ReporterConfig(BaseModel):
    renderer: str = "console"
    symbols: SymbolConfig = Field(default_factory=SymbolConfig)
    speed: SpeedConfig | None = None
    line_mode: bool = False

    model_config = {"frozen": True}
