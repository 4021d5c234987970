"""Process configuration, read from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from typing import Self

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LAYOUT = "PHPDP/5/5/5/phpdp"


def _port_from_env(value: str | None) -> int:
    if value is None:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring invalid DUEL_PORT=%r, using %d", value, DEFAULT_PORT)
        return DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    starting_layout: str = DEFAULT_LAYOUT
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> Self:
        cors_origins = os.getenv("DUEL_CORS_ORIGINS", "*").split(",")
        return cls(
            host=os.getenv("DUEL_HOST", DEFAULT_HOST),
            port=_port_from_env(os.getenv("DUEL_PORT")),
            log_level=os.getenv("DUEL_LOG_LEVEL", "INFO").upper(),
            starting_layout=os.getenv("DUEL_STARTING_LAYOUT", DEFAULT_LAYOUT),
            cors_origins=[origin.strip() for origin in cors_origins if origin.strip()],
        )
