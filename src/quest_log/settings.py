from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - QUEST_LOG_BACKEND_URL: base URL of the Task API (legacy alias: VITE_BACKEND_URL).
      Default 'http://127.0.0.1:8000', the reference service's default bind address.
    - QUEST_LOG_TIMEOUT_SECONDS: per-request timeout in seconds; 0 or negative disables it. Default 10
    - QUEST_LOG_LOG_LEVEL: log level name for setup_logging. Default 'INFO'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins for the reference service; '*' by default
    - HOST / PORT: bind address of the reference service. Default 127.0.0.1:8000
    """

    backend_url: str
    request_timeout: Optional[float]
    log_level: str
    cors_allow_origins: List[str]
    host: str
    port: int


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value.strip() == "":
        return default
    return value


def _first_env(*names: str, default: str) -> str:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return default


def _parse_timeout(value: str, default: float) -> Optional[float]:
    try:
        seconds = float(value.strip())
    except ValueError:
        return default
    return seconds if seconds > 0 else None


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    backend_url = _first_env("QUEST_LOG_BACKEND_URL", "VITE_BACKEND_URL", default=DEFAULT_BACKEND_URL)

    return Settings(
        backend_url=backend_url.strip().rstrip("/"),
        request_timeout=_parse_timeout(_get_env("QUEST_LOG_TIMEOUT_SECONDS", "10"), 10.0),
        log_level=_get_env("QUEST_LOG_LOG_LEVEL", "INFO").strip().upper(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_int(_get_env("PORT", "8000"), 8000),
    )
