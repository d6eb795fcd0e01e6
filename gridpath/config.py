"""Simple configuration loader for gridpath."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .search.heuristics import HEURISTICS


logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Defaults applied when a search does not say otherwise."""

    diagonal: bool = False
    heuristic: Optional[str] = None
    closest: bool = False


@dataclass
class LoggingConfig:
    """Log levels applied by :mod:`gridpath.main`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig


def _parse_heuristic(value: Any) -> Optional[str]:
    """Return a registered heuristic name, or ``None`` to match the grid."""

    if value is None:
        return None
    name = str(value).lower()
    if name == "auto":
        return None
    if name not in HEURISTICS:
        logger.warning(
            "Unknown heuristic '%s' in config, picking one from the grid instead.", name
        )
        return None
    return name


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    heuristic = _parse_heuristic(search_data.get("heuristic"))
    search = SearchConfig(
        diagonal=bool(search_data.get("diagonal", False)),
        heuristic=heuristic,
        closest=bool(search_data.get("closest", False)),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    return Config(search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "SearchConfig",
    "load_config",
]
