from __future__ import annotations

LEVEL_DEFAULT = "info"
LEVEL_ORDER = {"debug": 10, "info": 20, "ok": 20, "skip": 20, "warn": 30, "error": 40}

_threshold = LEVEL_DEFAULT


def _normalize_level(level: str | None) -> str:
    if not level:
        return LEVEL_DEFAULT
    return level.strip().lower() or LEVEL_DEFAULT


def _known_level(level: str | None) -> str:
    normalized = _normalize_level(level)
    if normalized not in LEVEL_ORDER:
        raise ValueError(f"Unknown log level '{level}'. Expected one of: {', '.join(LEVEL_ORDER)}")
    return normalized


def set_log_level(level: str | None) -> None:
    global _threshold
    _threshold = _known_level(level)


def get_log_level() -> str:
    return _threshold


def is_enabled(level: str) -> bool:
    return LEVEL_ORDER[_known_level(level)] >= LEVEL_ORDER[_threshold]


def log(message: str, level: str = LEVEL_DEFAULT, indent: int = 0) -> None:
    normalized = _known_level(level)
    if not is_enabled(normalized):
        return
    prefix = " " * max(indent, 0)
    print(f"{prefix}[{normalized}] {message}")


def log_debug(message: str, indent: int = 0) -> None:
    log(message, "debug", indent)


def log_info(message: str, indent: int = 0) -> None:
    log(message, "info", indent)


def log_warn(message: str, indent: int = 0) -> None:
    log(message, "warn", indent)


def log_error(message: str, indent: int = 0) -> None:
    log(message, "error", indent)


def log_skip(message: str, indent: int = 0) -> None:
    log(message, "skip", indent)


def log_ok(message: str, indent: int = 0) -> None:
    log(message, "ok", indent)
