"""FastAPI application factory for the query pagination service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from domain.exceptions import DomainException
from domain.models.config import PaginationConfig
from infrastructure.observability.logging_config import setup_logging
from infrastructure.settings import PaginationSettings, get_settings

from .api.v1 import items
from .middleware.pagination import PaginationMiddleware, skip_paths

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Routes that never carry pagination
PUBLIC_PATH_PREFIXES: tuple[str, ...] = (
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
)

# ---------------------------------------------------------------------------
# Exception handlers (RFC 9457 Problem Details)
# ---------------------------------------------------------------------------


def _problem_json(
    status_code: int,
    title: str,
    detail: str,
    *,
    error_type: str = "about:blank",
    instance: str | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {
        "type": error_type,
        "title": title,
        "status": status_code,
        "detail": detail,
    }
    if instance:
        body["instance"] = instance
    return JSONResponse(
        status_code=status_code,
        content=body,
        media_type="application/problem+json",
    )


async def _domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    return _problem_json(
        status_code=exc.status_code,
        title=exc.title,
        detail=exc.detail,
        error_type=exc.error_type,
        instance=str(request.url.path),
    )


async def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _problem_json(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        title="Internal Server Error",
        detail="An unexpected error occurred. Please try again later.",
        instance=str(request.url.path),
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

API_V1_PREFIX = "/api/v1"


def create_app(
    config: PaginationConfig | None = None,
    settings: PaginationSettings | None = None,
) -> FastAPI:
    """Build the application.

    Without an explicit *config*, one is derived from *settings* (or the
    environment) with documentation and health routes skipped.
    """
    settings = settings or get_settings()
    if config is None:
        config = PaginationConfig.from_settings(settings, skipper=skip_paths(*PUBLIC_PATH_PREFIXES))

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(settings.log_level, json_logs=settings.log_json)
        yield

    app = FastAPI(
        title="Query Pagination Service",
        version="1.0.0",
        description=(
            "Parses page, page size, sort and filter criteria from query "
            "strings and exposes them to request handlers."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )
    app.state.pagination_context_key = config.context_key

    # -- Custom middleware
    app.add_middleware(PaginationMiddleware, config=config)

    # -- API routers
    app.include_router(items.router, prefix=API_V1_PREFIX)

    # -- Exception handlers
    app.add_exception_handler(DomainException, _domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)

    @app.get("/health", tags=["Operations"], summary="Health check", response_model=dict)
    async def health_check() -> dict[str, Any]:
        return {
            "status": "healthy",
            "version": "1.0.0",
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
