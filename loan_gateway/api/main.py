"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_gateway.api.v1 import decision
from loan_gateway.infrastructure.observability.logging import setup_logging
from loan_gateway.config import settings

setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Decision Gateway",
        description="Loan amount and period decision service",
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

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()
