"""Echo endpoint showing how the pagination middleware read a query string."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from domain.models.pagination import FilterRequest

from ...middleware.pagination import get_pagination
from .schemas import ErrorResponse, PaginationResponse

router = APIRouter(prefix="/items", tags=["Items"])


@router.get(
    "",
    response_model=PaginationResponse,
    summary="Echo the parsed pagination request",
    responses={
        200: {"description": "Pagination, sort and filters as interpreted by the server."},
        500: {"description": "Pagination middleware not installed.", "model": ErrorResponse},
    },
)
async def list_items(
    pagination: FilterRequest = Depends(get_pagination),
) -> PaginationResponse:
    return PaginationResponse.from_filter_request(pagination)
