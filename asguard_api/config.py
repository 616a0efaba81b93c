from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment in a type-safe, framework-free way."""

    log_level: str
    environment: str

    @staticmethod
    def from_env() -> Settings:
        prefix = "ASGUARD_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        environment = os.getenv(f"{prefix}ENV", "local").strip() or "local"
        return Settings(log_level=log_level, environment=environment)
