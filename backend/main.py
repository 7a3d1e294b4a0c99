"""
Stunt Ledger - Main Application Entry Point

Exhibit G work day tracking and SAG-AFTRA pay calculation.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import get_settings
from backend.middleware.audit_log import AuditLogMiddleware
from backend.routers.v1 import bench, calculations, payments

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error monitoring
if settings.sentry_dsn:
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        release=f"stunt-ledger@{settings.app_version}",
        traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
        integrations=[FastApiIntegration()],
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    logger.info(f"{settings.app_name} {settings.app_version} starting ({settings.environment})")
    yield
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title=settings.app_name,
    description=(
        "Stunt Ledger tracks stunt performer work days and calculates "
        "SAG-AFTRA pay from Exhibit G times: overtime, the daily minimum "
        "guarantee, meal penalties and forced call."
    ),
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
    openapi_url="/api/openapi.json" if settings.debug else None,
)

# Audit logging middleware (outermost, captures all requests)
app.add_middleware(AuditLogMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "healthy", "service": "stunt-ledger-api", "version": settings.app_version}


# API v1 routes
app.include_router(
    calculations.router,
    prefix=settings.api_v1_prefix,
    tags=["Calculations"],
)
app.include_router(
    payments.router,
    prefix=f"{settings.api_v1_prefix}/payments",
    tags=["Payments"],
)
app.include_router(
    bench.router,
    prefix=f"{settings.api_v1_prefix}/test-bench",
    tags=["Test Bench"],
)
