"""Pagination settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PaginationSettings(BaseSettings):
    """Central configuration for query-string pagination."""

    model_config = {"env_prefix": "PAGINATION_", "case_sensitive": False}

    # Page number
    page_parameter: str = "page"
    page_default: int = Field(default=1, ge=1)
    page_max: int = Field(default=9999, ge=1)

    # Page size
    page_size_parameter: str = "pageSize"
    page_size_default: int = Field(default=20, ge=1)
    page_size_min: int = Field(default=2, ge=1)
    page_size_max: int = Field(default=1000, ge=1)

    # Sorting / filtering
    sort_parameter: str = "sort"
    filter_parameter: str = "filter"

    # request.state attribute the parsed result is stored under
    context_key: str = "pagination"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


def get_settings() -> PaginationSettings:
    """Return the pagination settings."""
    return PaginationSettings()
