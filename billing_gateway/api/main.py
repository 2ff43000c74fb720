"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from billing_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from billing_gateway.api.v1 import contracts, jobs, balances, admin
from billing_gateway.infrastructure.observability.logging import setup_logging
from billing_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Contractor Billing Gateway",
        description="Contracts, job payments, client deposits and earnings reports",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(contracts.router, tags=["contracts"])
    app.include_router(jobs.router, tags=["jobs"])
    app.include_router(balances.router, tags=["balances"])
    app.include_router(admin.router, tags=["admin"])

    return app


app = create_app()
