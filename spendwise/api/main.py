"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from spendwise.api.middleware import RequestIDMiddleware, MetricsMiddleware
from spendwise.api.v1 import dashboard, expenses, goals, insights, profile, rewards
from spendwise.infrastructure.database.models import Base
from spendwise.infrastructure.database.session import engine
from spendwise.infrastructure.observability.logging import setup_logging
from spendwise.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup when running against a fresh database
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="SpendWise",
        description="Expense tracking with spending scores, nudges and badges",
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
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(expenses.router, prefix="/v1", tags=["expenses"])
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(rewards.router, prefix="/v1", tags=["rewards"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])

    return app


app = create_app()
