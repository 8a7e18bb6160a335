"""
Pydantic v2 response schemas for the pagination echo API.

The models mirror :class:`~domain.models.pagination.FilterRequest` so a
client can see exactly how its query string was interpreted.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain.models.pagination import FilterRequest

# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _SnakeModel(BaseModel):
    """Base model; snake_case field names are used as-is on the wire."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={"$schema": "https://json-schema.org/draft/2020-12/schema"},
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_SnakeModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.query-pagination.example/problems/invalid-config"],
    )
    title: str = Field(
        ...,
        description="A short, human-readable summary of the problem type.",
        examples=["Invalid Pagination Configuration"],
    )
    status: int = Field(..., description="The HTTP status code.", examples=[500])
    detail: str = Field(
        ...,
        description="A human-readable explanation specific to this occurrence.",
        examples=["Pagination context is not available for this request."],
    )
    instance: str | None = Field(
        default=None,
        description="A URI reference that identifies the specific occurrence.",
        examples=["/api/v1/items"],
    )


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class FilterResponse(_SnakeModel):
    """One named filter and its untouched criterion objects."""

    name: str = Field(..., description="Filter name.", examples=["date"])
    items: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Criterion objects, in the order they were sent.",
        examples=[[{"gte": "2018-10-01T08:10:15.000Z", "lte": "2018-11-01T08:10:15.000Z"}]],
    )


class PaginationResponse(_SnakeModel):
    """Interpreted pagination, sorting and filter criteria of a request."""

    page: int = Field(..., description="Page number (1-indexed).", examples=[1])
    size: int = Field(..., description="Items per page after clamping.", examples=[20])
    offset: int = Field(..., description="Zero-based offset of the first item.", examples=[0])
    sort: str = Field(default="", description="Raw sort expression.", examples=["-created_at"])
    filters: list[FilterResponse] = Field(default_factory=list)

    @classmethod
    def from_filter_request(cls, result: FilterRequest) -> PaginationResponse:
        return cls.model_validate(result.to_dict())
