from __future__ import annotations

import logging

import pytest

from asguard_api.config import Settings
from asguard_api.dependencies import get_request_logger, get_settings


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASGUARD_ENV", "ci")
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert settings.environment == "ci"


def test_get_request_logger_returns_module_logger() -> None:
    logger = get_request_logger()
    assert isinstance(logger, logging.Logger)
    assert logger.name == "asguard_api.dependencies"
