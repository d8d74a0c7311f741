"""Server configuration, built once at startup and passed down."""
from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_PLAYERS = ("random", "first")


def _default_origins() -> List[str]:
    return ["http://localhost:3000", "http://127.0.0.1:3000"]


def _parse_origins(value: Union[str, List[str], None]) -> Union[str, List[str]]:
    if value is None:
        return _default_origins()
    if isinstance(value, list):
        return value
    if value.strip() == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: Union[str, List[str]] = field(default_factory=_default_origins)
    player: str = "random"
    seed: Optional[int] = None
    author: str = ""
    color: str = "#ee2c2c"
    head: str = "default"
    tail: str = "default"

    def __post_init__(self):
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            raise ValueError(f"Port must be a number, got {self.port!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")

        self.log_level = str(self.log_level).strip().upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level {self.log_level!r}. Must be one of: {', '.join(VALID_LOG_LEVELS)}")

        self.player = str(self.player).strip().lower()
        if self.player not in VALID_PLAYERS:
            raise ValueError(f"Invalid player {self.player!r}. Must be one of: {', '.join(VALID_PLAYERS)}")

        if self.seed is not None:
            try:
                self.seed = int(self.seed)
            except (TypeError, ValueError):
                raise ValueError(f"Seed must be an integer, got {self.seed!r}")

        self.cors_origins = _parse_origins(self.cors_origins)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__ and v is not None}
        return cls(**known)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "ServerConfig":
        """
        Read settings from the environment (os.environ by default).

        Keyword overrides (e.g. from command-line flags) win over the
        environment; None values are ignored.
        """
        env = os.environ if environ is None else environ
        data = {
            "host": env.get("HOST"),
            "port": env.get("PORT"),
            "log_level": env.get("LOG_LEVEL"),
            "cors_origins": env.get("CORS_ORIGINS"),
            "player": env.get("SNAKE_PLAYER"),
            "seed": env.get("SNAKE_SEED") or None,
            "author": env.get("SNAKE_AUTHOR"),
            "color": env.get("SNAKE_COLOR"),
            "head": env.get("SNAKE_HEAD"),
            "tail": env.get("SNAKE_TAIL"),
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
