from datetime import datetime, timezone

from fastapi import FastAPI

from stable_api.api.exception_handlers import register_exception_handlers
from stable_api.api.middleware import log_requests
from stable_api.api.v1.router import api_router
from stable_api.core.config import settings
from stable_api.core.logging_config import setup_logging
from stable_api.schemas.health import HealthCheck


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_file, settings.log_error_file)

    app = FastAPI(
        title="Horse Management API",
        description="API for managing horses and their owners",
        version="1.0",
        docs_url="/api-docs",
        openapi_tags=[
            {"name": "horses"},
            {"name": "owners"},
            {"name": "health"},
        ],
    )

    if not settings.is_test:
        app.middleware("http")(log_requests)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/api/health", response_model=HealthCheck, tags=["health"])
    def health():
        return HealthCheck(status="ok", timestamp=datetime.now(timezone.utc))

    return app


app = create_app()
