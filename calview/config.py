"""
Runtime settings, read from environment variables.

    CALVIEW_EVENTS_PATH       events JSON file (default: calview/data/events.json)
    CALVIEW_HOUR_UNIT         size of one hour row for event styles (default: 4.0)
    CALVIEW_MAX_CELL_EVENTS   events listed per month cell before "+N more" (default: 3)
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HOUR_UNIT = 4.0
DEFAULT_MAX_CELL_EVENTS = 3


def default_events_path() -> Path:
    """
    Default location of events.json inside the package.

    A function rather than a constant so tests can point elsewhere.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "events.json"


@dataclass(frozen=True)
class Settings:
    events_path: Path
    hour_unit: float = DEFAULT_HOUR_UNIT
    max_cell_events: int = DEFAULT_MAX_CELL_EVENTS


def _read_number(env: Mapping[str, str], name: str, cast: Callable[[str], T], default: T) -> T:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a valid number), using %s", name, raw, default)
        return default
    if not math.isfinite(value):  # type: ignore[arg-type]
        logger.warning("Ignoring %s=%r (not a finite number), using %s", name, raw, default)
        return default
    if value <= 0:  # type: ignore[operator]
        logger.warning("Ignoring %s=%r (must be positive), using %s", name, raw, default)
        return default
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ

    raw_path = env.get("CALVIEW_EVENTS_PATH", "").strip()
    events_path = Path(raw_path).expanduser() if raw_path else default_events_path()

    return Settings(
        events_path=events_path,
        hour_unit=_read_number(env, "CALVIEW_HOUR_UNIT", float, DEFAULT_HOUR_UNIT),
        max_cell_events=_read_number(env, "CALVIEW_MAX_CELL_EVENTS", int, DEFAULT_MAX_CELL_EVENTS),
    )
