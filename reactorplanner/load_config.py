from __future__ import annotations

import toml
from dataclasses import dataclass
from pathlib import Path

from .logging_utils import LEVEL_DEFAULT, log_warn, set_log_level


@dataclass(slots=True)
class PlannerConfig:
    location_tracking: bool = False
    log_level: str = LEVEL_DEFAULT


def load_config(config_path: Path) -> PlannerConfig:
    """Load planner settings from a TOML file.

    Recognised keys are ``location_tracking`` (bool) and ``log_level`` (str).
    Anything else in the file is ignored.
    """

    config = PlannerConfig()

    if not config_path.exists():
        log_warn(f"Config file {config_path} not found. Proceeding with defaults.")
        return config

    raw_text = config_path.read_text(encoding="utf-8")
    try:
        raw = toml.loads(raw_text)
    except toml.TomlDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {config_path}") from exc

    tracking = raw.get("location_tracking", config.location_tracking)
    if not isinstance(tracking, bool):
        raise ValueError(f"'location_tracking' must be true or false in {config_path}")
    config.location_tracking = tracking

    level = raw.get("log_level", config.log_level)
    if not isinstance(level, str):
        raise ValueError(f"'log_level' must be a string in {config_path}")
    config.log_level = level.strip().lower() or LEVEL_DEFAULT

    return config


def apply_config(config: PlannerConfig) -> None:
    set_log_level(config.log_level)
