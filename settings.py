from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper() or default
    if level not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return level


def _env_port(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        port = int(raw.strip().lstrip(":"))
    except ValueError as e:
        raise ValueError(f"{name} must be an integer port, got {raw!r}") from e
    if not 0 < port < 65536:
        raise ValueError(f"{name} out of range: {port}")
    return port


@dataclass(frozen=True)
class Settings:
    # Listener
    host: str
    port: int

    # Logging
    log_level: str
    debug_log_requests: bool

    # Store behaviour
    strict_missing_keys: bool


def get_settings() -> Settings:
    host = os.getenv("KV_HOST", "0.0.0.0").strip() or "0.0.0.0"
    # Accepts "3000" as well as the ":3000" listen-address form.
    port = _env_port("KV_PORT", 3000)

    log_level = _env_log_level("LOG_LEVEL", "INFO")
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    # Off by default: update/delete of a missing key stay silent no-ops.
    strict_missing_keys = _env_bool("STRICT_MISSING_KEYS", False)

    return Settings(
        host=host,
        port=port,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
        strict_missing_keys=strict_missing_keys,
    )
