from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from asguard_api.config import Settings
from asguard_api.logging import get_logger


def get_settings() -> Settings:
    """Dependency: typed application settings from environment."""
    return Settings.from_env()


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_request_logger() -> logging.Logger:
    """Dependency: request-scoped logger (delegates to global logger)."""
    return get_logger(__name__)


LoggerDep = Annotated[logging.Logger, Depends(get_request_logger)]
