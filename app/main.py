# app/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.logging_config import get_logger, setup_logging
from app.core.request_logging import RequestLoggingMiddleware
from app.core.sentry_config import init_sentry
from app.database.database import create_tables, get_db
from app.routes.auth_routes import router as auth_router
from app.routes.categories import router as categories_router
from app.routes.holidays import router as holidays_router
from app.routes.transactions import router as transactions_router
from app.routes.work_sessions import router as work_sessions_router

APP_VERSION = "0.1.0"

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

# Initialize Sentry for error tracking (production only)
sentry_enabled = init_sentry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": os.getenv("PRODUCTION", "false").lower() == "true",
                "python_version": sys.version,
                "sentry_enabled": sentry_enabled,
            }
        },
    )

    try:
        create_tables()
        logger.info("Database tables created/verified")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}", exc_info=True)
        raise

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="Work Tracker",
    description="Personal finance and work-hours tracker with tiered overtime earnings",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS Configuration
IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    # Production: Strict CORS - only allow specified origins
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )

    allowed_origins = CORS_ORIGINS
    allowed_methods = ["GET", "POST", "DELETE"]  # Only allow methods we use
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    allowed_methods = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=allowed_methods,
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(auth_router)
app.include_router(work_sessions_router)
app.include_router(holidays_router)
app.include_router(transactions_router)
app.include_router(categories_router)


@app.get("/health", tags=["health"])
async def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for monitoring.

    Returns 200 when the database answers, 503 otherwise.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check failed - database connection error: {e}", exc_info=True)
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "service": "work-tracker",
                "database": "disconnected",
                "error": "Database connection failed",
            },
        ) from e

    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": "work-tracker",
            "version": APP_VERSION,
            "database": "connected",
        },
    )
