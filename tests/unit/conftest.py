"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from domain.models.config import DEFAULT_PAGINATION_CONFIG, PaginationConfig
from domain.models.pagination import Filter, FilterRequest, PageRequest

DATE_FILTER_JSON = (
    '[{"date": [{"gte": "2018-10-01T08:10:15.000Z", "lte":"2018-11-01T08:10:15.000Z"}]},'
    ' {"q": [{"name": "test"}]}]'
)


@pytest.fixture
def config() -> PaginationConfig:
    return DEFAULT_PAGINATION_CONFIG


@pytest.fixture
def date_filter_json() -> str:
    return DATE_FILTER_JSON


@pytest.fixture
def sample_filter_request() -> FilterRequest:
    return FilterRequest(
        page_request=PageRequest(page=2, size=20, sort="-created_at"),
        filters=[
            Filter(name="date", items=[{"gte": "A", "lte": "B"}]),
            Filter(name="q", items=[{"name": "test"}]),
        ],
    )
