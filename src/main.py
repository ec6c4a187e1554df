"""
Main FastAPI application entry point.

Wires settings, middleware (CORS, trace), RFC 7807 exception handlers and
the v1 routers. Run with:

    uvicorn src.main:app --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import v1_router
from src.presentation.api.v1.errors import register_exception_handlers
from src.schemas.common import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose of the database connection pool
    """
    logger = get_logger()
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        debug=settings.debug,
    )

    yield

    await get_database().close()
    logger.info("Application stopped")


app = FastAPI(
    title=settings.app_name,
    description="Receivables intake: assignors and the payables owed to them",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# The React intake form is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Trace-Id"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Always answers 200; status is "degraded" when the database is unreachable.
    """
    database_ok = await get_database().check_connection()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        version=settings.app_version,
        database="ok" if database_ok else "unavailable",
    )
