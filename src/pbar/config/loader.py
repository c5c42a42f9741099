"""Reporter config loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pbar.contracts.config import ReporterConfig
from pbar.contracts.exceptions import ConfigError
from pbar.renderers.factory import RENDERERS

_LOG = logging.getLogger(__name__)


def load_config(path: str | Path) -> ReporterConfig:
    """Load and validate a reporter config from a JSON file."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ReporterConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    if parsed.renderer not in RENDERERS:
        raise ConfigError(f"renderer must be one of: {', '.join(sorted(RENDERERS))}")
    _LOG.debug("Loaded reporter config from %s", config_path)
    return parsed
