"""Tests for presentation.middleware.pagination."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, Request
from starlette.testclient import TestClient

from domain.models.config import PaginationConfig
from domain.models.pagination import FilterRequest
from presentation.middleware.pagination import (
    PaginationMiddleware,
    get_pagination,
    pagination_dependency,
    skip_paths,
)


def _build_app(config: PaginationConfig | None = None) -> tuple[FastAPI, list[Any]]:
    """Return an app whose routes record what they found on ``request.state``."""
    seen: list[Any] = []
    app = FastAPI()
    app.add_middleware(PaginationMiddleware, config=config)
    key = (config or PaginationConfig()).context_key

    @app.get("/probe")
    async def probe(request: Request) -> dict[str, Any]:
        value = getattr(request.state, key, None)
        seen.append(value)
        return {"present": value is not None}

    @app.get("/health")
    async def health(request: Request) -> dict[str, Any]:
        value = getattr(request.state, key, None)
        seen.append(value)
        return {"present": value is not None}

    @app.get("/needs-pagination")
    async def needs_pagination(
        pagination: FilterRequest = Depends(pagination_dependency(key)),
    ) -> dict[str, Any]:
        return pagination.to_dict()

    return app, seen


class TestSkipPaths:
    def test_matches_prefix(self) -> None:
        app, seen = _build_app(PaginationConfig(skipper=skip_paths("/health")))
        client = TestClient(app)
        client.get("/health?page=3")
        client.get("/probe?page=3")
        assert seen[0] is None
        assert isinstance(seen[1], FilterRequest)


class TestPaginationMiddleware:
    def test_stores_result_under_context_key(self) -> None:
        app, seen = _build_app()
        resp = TestClient(app).get("/probe?page=5&pageSize=1&sort=name")
        assert resp.status_code == 200
        assert resp.json() == {"present": True}
        result = seen[0]
        assert result.page_request.page == 5
        assert result.page_request.size == 2
        assert result.page_request.sort == "name"
        assert result.filters == []

    def test_custom_context_key(self) -> None:
        app, seen = _build_app(PaginationConfig(context_key="paging"))
        TestClient(app).get("/probe")
        assert isinstance(seen[0], FilterRequest)

    def test_skipper_bypasses_extraction_but_calls_next(self) -> None:
        calls: list[str] = []

        def skipper(request: Request) -> bool:
            calls.append(request.url.path)
            return True

        app, seen = _build_app(PaginationConfig(skipper=skipper))
        resp = TestClient(app).get("/probe?page=2")
        assert resp.status_code == 200
        assert resp.json() == {"present": False}
        assert seen == [None]
        assert calls == ["/probe"]

    def test_malformed_input_never_fails_request(self) -> None:
        app, seen = _build_app()
        resp = TestClient(app).get(
            "/probe", params={"page": "x", "pageSize": "y", "filter": "[{"}
        )
        assert resp.status_code == 200
        assert seen[0].page_request.page == 1
        assert seen[0].page_request.size == 20
        assert seen[0].filters == []

    def test_huge_numbers_do_not_fail_request(self) -> None:
        app, seen = _build_app()
        resp = TestClient(app).get(
            "/probe", params={"page": "1" * 5000, "pageSize": "9" * 5000}
        )
        assert resp.status_code == 200
        assert seen[0].page_request.page == 1
        assert seen[0].page_request.size == 20

    def test_filters_from_query_string(self, date_filter_json: str) -> None:
        app, seen = _build_app()
        TestClient(app).get("/probe", params={"filter": date_filter_json})
        assert [f.name for f in seen[0].filters] == ["date", "q"]

    def test_each_request_gets_fresh_result(self) -> None:
        app, seen = _build_app()
        client = TestClient(app)
        client.get("/probe?page=3")
        client.get("/probe?page=3")
        assert seen[0] == seen[1]
        assert seen[0] is not seen[1]


class TestPaginationDependency:
    def test_returns_stored_result(self) -> None:
        app, _ = _build_app()
        resp = TestClient(app).get("/needs-pagination?page=2&pageSize=10")
        assert resp.status_code == 200
        body = resp.json()
        assert body["page"] == 2
        assert body["size"] == 10
        assert body["offset"] == 10

    def test_missing_context_is_server_error(self) -> None:
        app, _ = _build_app(PaginationConfig(skipper=lambda request: True))
        resp = TestClient(app).get("/needs-pagination")
        assert resp.status_code == 500

    def test_custom_key_read_end_to_end(self) -> None:
        app, _ = _build_app(PaginationConfig(context_key="paging"))
        resp = TestClient(app).get("/needs-pagination?page=4&pageSize=25&sort=name")
        assert resp.status_code == 200
        body = resp.json()
        assert body["page"] == 4
        assert body["size"] == 25
        assert body["sort"] == "name"

    def test_get_pagination_uses_key_published_on_app_state(self) -> None:
        app = FastAPI()
        app.add_middleware(PaginationMiddleware, config=PaginationConfig(context_key="paging"))
        app.state.pagination_context_key = "paging"

        @app.get("/listing")
        async def listing(pagination: FilterRequest = Depends(get_pagination)) -> dict[str, Any]:
            return pagination.to_dict()

        resp = TestClient(app).get("/listing?page=3")
        assert resp.status_code == 200
        assert resp.json()["page"] == 3

    def test_get_pagination_with_mismatched_key_is_server_error(self) -> None:
        app = FastAPI()
        app.add_middleware(PaginationMiddleware, config=PaginationConfig(context_key="paging"))

        @app.get("/listing")
        async def listing(pagination: FilterRequest = Depends(get_pagination)) -> dict[str, Any]:
            return pagination.to_dict()

        assert TestClient(app).get("/listing").status_code == 500
