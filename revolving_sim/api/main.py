"""FastAPI application factory"""

from pathlib import Path
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from revolving_sim.api.middleware import RequestIDMiddleware, MetricsMiddleware
from revolving_sim.api.spa import register_spa
from revolving_sim.api.v1 import simulate
from revolving_sim.infrastructure.observability.logging import setup_logging
from revolving_sim.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(static_dir: Path | None = None) -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Revolving Credit Simulator",
        description="Revolving balance repayment projection service",
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
    app.include_router(simulate.router, prefix="/v1", tags=["simulations"])

    # Frontend bundle goes last so it never shadows the API
    register_spa(app, static_dir or settings.static_dir)

    return app


app = create_app()
