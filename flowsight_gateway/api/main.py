"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from flowsight_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from flowsight_gateway.api.v1 import cashflow, dashboard, app_settings
from flowsight_gateway.infrastructure.observability.logging import setup_logging
from flowsight_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Flow Sight Gateway",
        description="Personal cashflow projection service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(cashflow.router, prefix=API_PREFIX, tags=["cashflow"])
    app.include_router(dashboard.router, prefix=API_PREFIX, tags=["dashboard"])
    app.include_router(app_settings.router, prefix=API_PREFIX, tags=["settings"])

    return app


app = create_app()
