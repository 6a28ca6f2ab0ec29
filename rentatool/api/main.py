"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from rentatool.api.middleware import RequestIDMiddleware, MetricsMiddleware
from rentatool.api.v1 import checkout, tools
from rentatool.infrastructure.database.session import init_db
from rentatool.infrastructure.observability.logging import setup_logging
from rentatool.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and stock inventory before serving"""
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Rent-A-Tool Checkout",
        description="Tool inventory and rental agreement pricing service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(tools.router, prefix="/v1", tags=["tools"])
    app.include_router(checkout.router, prefix="/v1", tags=["checkout"])

    return app


app = create_app()
