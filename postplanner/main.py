"""
PostPlanner API - FastAPI application entry point.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from .config import get_settings
from .database import init_db
from .errors import ConstraintViolation
from .logging_config import api_logger
from .middleware import SecurityHeadersMiddleware, RequestLoggingMiddleware
from .responses import api_exception_handler
from .routes import (
    users_router,
    platforms_router,
    designs_router,
    posts_router,
    reports_router,
)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup (in production, migrate instead)."""
    init_db()
    api_logger.info("Database ready", environment=settings.environment)
    yield


app = FastAPI(
    title=settings.app_name,
    description="Design assets and scheduled social media posts",
    version="1.0.0",
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.add_exception_handler(ConstraintViolation, api_exception_handler)
app.add_exception_handler(HTTPException, api_exception_handler)

app.add_middleware(SecurityHeadersMiddleware)

# Request logging middleware (only in debug mode)
if settings.debug:
    app.add_middleware(RequestLoggingMiddleware)

# Routes
app.include_router(users_router)
app.include_router(platforms_router)
app.include_router(designs_router)
app.include_router(posts_router)
app.include_router(reports_router)


@app.get("/api/health")
def health_check():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "version": "1.0.0",
    }
