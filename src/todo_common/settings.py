from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Service settings read from the process environment.

    Env vars:
    - HOST: interface to bind. Default '0.0.0.0'
    - PORT: TCP port to listen on. Default 8080
    - LOG_LEVEL: logging level name. Default 'INFO'
    - CORS_ALLOW_ORIGINS: comma-separated origins, or '*' for any. Default '*'
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def allows_any_origin(self) -> bool:
        return not self.cors_allow_origins or "*" in self.cors_allow_origins


def _env(name: str) -> str:
    # Unset and blank both mean "use the default"
    return (os.environ.get(name) or "").strip()


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Build Settings from the environment, ignoring values that do not parse."""
    defaults = Settings()

    port = defaults.port
    raw_port = _env("PORT")
    if raw_port.isdigit() and 0 < int(raw_port) < 65536:
        port = int(raw_port)

    log_level = _env("LOG_LEVEL").upper()
    if log_level not in _LOG_LEVELS:
        log_level = defaults.log_level

    raw_origins = _env("CORS_ALLOW_ORIGINS")
    origins = [o.strip() for o in raw_origins.split(",") if o.strip()] if raw_origins else defaults.cors_allow_origins

    return Settings(
        host=_env("HOST") or defaults.host,
        port=port,
        log_level=log_level,
        cors_allow_origins=origins,
    )
