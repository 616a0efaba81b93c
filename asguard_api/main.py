from __future__ import annotations

from datetime import datetime, timezone

from fastapi import FastAPI

from asguard_api.config import Settings
from asguard_api.dependencies import LoggerDep, SettingsDep
from asguard_api.logging import setup_logging
from asguard_api.middleware import GuardMiddleware
from asguard_api.models import HealthResponse


def create_app() -> FastAPI:
    setup_logging(Settings.from_env().log_level)
    app = FastAPI(title="AsGuard API", version="1.0.0")

    @app.get("/api/v1/health", response_model=HealthResponse)
    async def health(settings: SettingsDep, logger: LoggerDep) -> HealthResponse:
        logger.debug("Health check", extra={"path": "/api/v1/health"})
        return HealthResponse(
            status="healthy",
            environment=settings.environment,
            timestamp=datetime.now(timezone.utc),
        )

    # Added last so it wraps every other application middleware.
    app.add_middleware(GuardMiddleware)
    return app
