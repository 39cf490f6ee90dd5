"""Startup configuration.

Settings come from a small TOML file::

    target_width = 20.0   # wedge width, degrees
    wait_time = 1.0       # seconds between targets
    target_time = 1.0     # seconds a target stays up
    tick_rate = 60        # logical updates per second (optional)
    timer = "ticks"       # "ticks" or "clock" (optional)
    max_backlog = 0.25    # seconds of tick debt kept after a stall (optional)

A missing file means built-in defaults. A file that exists but cannot be read
or holds bad values raises ``ConfigError``; startup is expected to abort.
"""

from __future__ import annotations

import logging
import math
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .timers import TimerKind

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "GORES_TRAINER_CONFIG"
DEFAULT_CONFIG_NAME = "config.toml"
# Logical updates per second; far above any display refresh rate.
MAX_TICK_RATE = 1000.0
MAX_PHASE_S = 24 * 60 * 60.0


class ConfigError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class GameConfig:
    target_width_deg: float = 20.0
    wait_time_s: float = 1.0
    target_time_s: float = 1.0
    tick_rate: float = 60.0
    timer: TimerKind = TimerKind.TICKS
    max_backlog_s: float | None = 0.25

    def __post_init__(self) -> None:
        for name in ("target_width_deg", "wait_time_s", "target_time_s", "tick_rate", "max_backlog_s"):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value!r}")
        if not (0.0 < self.target_width_deg < 360.0):
            raise ConfigError("target_width must be in (0, 360)")
        if not (0.0 <= self.wait_time_s <= MAX_PHASE_S):
            raise ConfigError(f"wait_time must be in [0, {MAX_PHASE_S:g}]")
        if not (0.0 <= self.target_time_s <= MAX_PHASE_S):
            raise ConfigError(f"target_time must be in [0, {MAX_PHASE_S:g}]")
        if not (0.0 < self.tick_rate <= MAX_TICK_RATE):
            raise ConfigError(f"tick_rate must be in (0, {MAX_TICK_RATE:g}]")
        if self.max_backlog_s is not None and self.max_backlog_s <= 0:
            raise ConfigError("max_backlog must be > 0")


def default_config_path() -> Path:
    explicit = os.environ.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _number(data: dict[str, object], key: str, fallback: float) -> float:
    value = data.get(key, fallback)
    # bool is an int subclass; "true" is not a duration.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be finite, got {value!r}")
    return float(value)


def config_from_dict(data: dict[str, object]) -> GameConfig:
    defaults = GameConfig()

    raw_timer = data.get("timer", defaults.timer.value)
    try:
        timer = TimerKind(str(raw_timer))
    except ValueError:
        raise ConfigError(f"timer must be one of {[k.value for k in TimerKind]}, got {raw_timer!r}") from None

    max_backlog: float | None = defaults.max_backlog_s
    if "max_backlog" in data:
        max_backlog = _number(data, "max_backlog", 0.0)

    return GameConfig(
        target_width_deg=_number(data, "target_width", defaults.target_width_deg),
        wait_time_s=_number(data, "wait_time", defaults.wait_time_s),
        target_time_s=_number(data, "target_time", defaults.target_time_s),
        tick_rate=_number(data, "tick_rate", defaults.tick_rate),
        timer=timer,
        max_backlog_s=max_backlog,
    )


def load_config(path: Path | None = None) -> GameConfig:
    cfg_path = default_config_path() if path is None else Path(path)
    if not cfg_path.exists():
        logger.debug("no config at %s, using defaults", cfg_path)
        return GameConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"cannot read config {cfg_path}: {exc}") from exc

    config = config_from_dict(data)
    logger.info("loaded config from %s: %s", cfg_path, config)
    return config
