"""AppConfig: startup configuration for the converter server."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_TEMPLATES_DIR = PACKAGE_DIR / "templates"
DEFAULT_STATIC_DIR = PACKAGE_DIR / "static"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

TEMPLATES_DIR_ENV = "UNITCONV_TEMPLATES_DIR"
STATIC_DIR_ENV = "UNITCONV_STATIC_DIR"


@dataclass(frozen=True)
class AppConfig:
    """Immutable server configuration, built once before serving."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    templates_dir: Path | None = None
    static_dir: Path | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, **overrides: Any) -> AppConfig:
        """Build a config from ``UNITCONV_*`` environment variables.

        Keyword overrides that are not None take precedence over the environment.
        """
        values: dict[str, Any] = {}
        templates_dir = os.environ.get(TEMPLATES_DIR_ENV)
        if templates_dir:
            values["templates_dir"] = Path(templates_dir)
        static_dir = os.environ.get(STATIC_DIR_ENV)
        if static_dir:
            values["static_dir"] = Path(static_dir)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> AppConfig:
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def resolved_templates_dir(self) -> Path:
        return self.templates_dir or DEFAULT_TEMPLATES_DIR

    @property
    def resolved_static_dir(self) -> Path:
        return self.static_dir or DEFAULT_STATIC_DIR

    def validate(self) -> None:
        """Raise ValueError if any setting is unusable."""
        if not self.host:
            raise ValueError("Host must not be empty")
        if not isinstance(self.port, int) or self.port < 1 or self.port > 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}. Valid: {sorted(VALID_LOG_LEVELS)}")
        for label, path in (
            ("templates_dir", self.resolved_templates_dir),
            ("static_dir", self.resolved_static_dir),
        ):
            if not path.is_dir():
                raise ValueError(f"{label} '{path}' is not a directory")
