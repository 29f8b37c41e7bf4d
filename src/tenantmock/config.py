"""Configuration for the tenant translator mock.

Reads from config/tenantmock.ini if present, environment variables override.
HOST and PORT keep their bare names so existing deployments need no changes.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "tenantmock.ini"

DEFAULT_PORT = 12000

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class TenantMockConfig:
    """Service configuration. Immutable once loaded."""

    host: str = ""
    port: int = DEFAULT_PORT
    seed: int | None = None
    max_identifiers: int = 0
    max_body_bytes: int = 0
    exit_on_error: bool = False
    log_level: str = "INFO"


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def _coerce(config_key: str, value: str):
    if config_key in ("port", "max_identifiers", "max_body_bytes"):
        return int(value)
    if config_key == "seed":
        return int(value) if value.strip() else None
    if config_key == "exit_on_error":
        return _parse_bool(value)
    if config_key == "log_level":
        return value.strip().upper()
    return value


def load_config(config_path: Path | None = None) -> TenantMockConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        for section, keys in [
            ("server", ("host", "port", "log_level")),
            ("translator", ("seed", "max_identifiers", "max_body_bytes", "exit_on_error")),
        ]:
            if not parser.has_section(section):
                continue
            for key in keys:
                val = parser.get(section, key, fallback=None)
                if val is not None:
                    kwargs[key] = _coerce(key, val)

    env_map = {
        "HOST": "host",
        "PORT": "port",
        "TENANTMOCK_SEED": "seed",
        "TENANTMOCK_MAX_IDENTIFIERS": "max_identifiers",
        "TENANTMOCK_MAX_BODY_BYTES": "max_body_bytes",
        "TENANTMOCK_EXIT_ON_ERROR": "exit_on_error",
        "TENANTMOCK_LOG_LEVEL": "log_level",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is None:
            continue
        # An empty PORT falls back to the default; an empty HOST binds all interfaces.
        if config_key == "port" and not val.strip():
            kwargs.pop("port", None)
            continue
        kwargs[config_key] = _coerce(config_key, val)

    return TenantMockConfig(**kwargs)
