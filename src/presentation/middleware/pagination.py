"""
Pagination middleware for FastAPI / Starlette applications.

Parses page, page size, sort and filter criteria from the query string of
every non-skipped request and attaches the resulting
:class:`~domain.models.pagination.FilterRequest` to ``request.state`` under
the configured context key.  Malformed input never fails the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from application.services.extractor import PaginationExtractor
from domain.models.config import CONTEXT_KEY, DEFAULT_PAGINATION_CONFIG, PaginationConfig
from domain.models.pagination import FilterRequest
from infrastructure.observability.logging_config import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.types import ASGIApp

logger = get_logger("query_pagination.middleware")


# ---------------------------------------------------------------------------
# Skippers
# ---------------------------------------------------------------------------


def skip_paths(*prefixes: str) -> Callable[[Request], bool]:
    """Build a skipper that bypasses requests whose path starts with a prefix."""

    def _skipper(request: Request) -> bool:
        path = request.url.path
        return any(path.startswith(prefix) for prefix in prefixes)

    return _skipper


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class PaginationMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that attaches a :class:`FilterRequest` to
    ``request.state`` for every request the configured skipper lets through.

    Skipped requests go straight to the next stage and get no context value.
    The middleware never reads the stored value back.
    """

    def __init__(self, app: ASGIApp, config: PaginationConfig | None = None) -> None:
        super().__init__(app)
        self.config = config or DEFAULT_PAGINATION_CONFIG
        self._extract = PaginationExtractor(self.config)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self.config.skipper(request):
            return await call_next(request)

        result = self._extract(request.query_params)
        setattr(request.state, self.config.context_key, result)

        logger.debug(
            "pagination_extracted",
            path=str(request.url.path),
            page=result.page_request.page,
            size=result.page_request.size,
            sort=result.page_request.sort,
            filter_count=len(result.filters),
        )

        return await call_next(request)


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------


def pagination_dependency(
    context_key: str | None = None,
) -> Callable[[Request], Awaitable[FilterRequest]]:
    """Return a FastAPI dependency reading the result stored under *context_key*.

    Without an explicit key, the one published on
    ``app.state.pagination_context_key`` by ``create_app`` is used, falling
    back to ``"pagination"``.

    Raises:
        HTTPException(500): If :class:`PaginationMiddleware` did not run for
            the route (not installed, or the route is skipped).
    """

    async def _get_pagination(request: Request) -> FilterRequest:
        key = context_key or getattr(request.app.state, "pagination_context_key", CONTEXT_KEY)
        result: FilterRequest | None = getattr(request.state, key, None)
        if result is None:
            logger.error("pagination_context_missing", path=str(request.url.path))
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Pagination context is not available for this request.",
            )
        return result

    return _get_pagination


get_pagination = pagination_dependency()
