"""Extraction of pagination, sorting and filter criteria from query parameters.

``extract_pagination`` turns one request's query parameters into a
:class:`FilterRequest`.  Malformed or missing input never raises; every
value degrades to its configured default (or to no filters at all).

Filters are sent as a single JSON array under the filter parameter::

    [{"date": [{"gte": "2018-10-01T08:10:15.000Z", "lte": "..."}]},
     {"q": [{"name": "test"}]}]

Each key of each array element becomes one :class:`Filter`, in order of
appearance.  Repeated names are kept as separate filters.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from domain.models.config import DEFAULT_PAGINATION_CONFIG, PaginationConfig
from domain.models.pagination import Filter, FilterRequest, PageRequest

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = 19

# null array entries are skipped; null criteria lists and criteria decode as empty
FilterPayload = list[Optional[dict[str, Optional[list[Optional[dict[str, Any]]]]]]]

_filter_adapter: TypeAdapter[FilterPayload] = TypeAdapter(FilterPayload)


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------


def first_value(query_params: Mapping[str, Any], key: str) -> str:
    """Return the first value for *key*, or ``""`` when absent.

    Multi-valued containers (anything exposing ``getlist``, such as
    Starlette's ``QueryParams``) yield their first value rather than the
    last one ``__getitem__`` would return.
    """
    getlist = getattr(query_params, "getlist", None)
    if getlist is not None:
        values = getlist(key)
        return str(values[0]) if values else ""
    value = query_params.get(key)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    return str(value)


def parse_int(raw: str) -> Optional[int]:
    """Parse a signed decimal integer strictly, or return ``None``.

    Surrounding whitespace, underscores, non-ASCII digits and values outside
    the signed 64-bit range are all rejected.  Over-long digit strings are
    refused before conversion, so huge inputs never reach ``int()``.
    """
    if not _INT_PATTERN.fullmatch(raw):
        return None
    sign = -1 if raw.startswith("-") else 1
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _INT64_MAX_DIGITS:
        return None
    value = sign * int(digits)
    if value < _INT64_MIN or value > _INT64_MAX:
        return None
    return value


def resolve_page(raw: str, config: PaginationConfig) -> int:
    # Out-of-range pages reset to the default instead of clamping.
    value = parse_int(raw)
    if value is None or value < config.page_default or value > config.page_max:
        return config.page_default
    return value


def resolve_page_size(raw: str, config: PaginationConfig) -> int:
    value = parse_int(raw)
    if value is None:
        return config.page_size_default
    if value < config.page_size_min:
        return config.page_size_min
    if value > config.page_size_max:
        return config.page_size_max
    return value


def parse_filters(raw: str) -> list[Filter]:
    """Decode the JSON filter array, returning ``[]`` on any failure."""
    if not raw:
        return []
    try:
        payload = _filter_adapter.validate_json(raw)
    except ValidationError as exc:
        logger.debug("Ignoring malformed filter parameter: %s", exc.errors(include_url=False))
        return []

    filters: list[Filter] = []
    for entry in payload:
        if entry is None:
            continue
        for name, items in entry.items():
            criteria = [item if item is not None else {} for item in items or []]
            filters.append(Filter(name=name, items=criteria))
    return filters


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_pagination(
    query_params: Mapping[str, Any],
    config: PaginationConfig = DEFAULT_PAGINATION_CONFIG,
) -> FilterRequest:
    """Build a :class:`FilterRequest` from one request's query parameters."""
    page = resolve_page(first_value(query_params, config.page_parameter), config)
    size = resolve_page_size(first_value(query_params, config.page_size_parameter), config)
    sort = first_value(query_params, config.sort_parameter)

    filters: list[Filter] = []
    if config.filter_parameter in query_params:
        filters = parse_filters(first_value(query_params, config.filter_parameter))

    return FilterRequest(
        page_request=PageRequest(page=page, size=size, sort=sort),
        filters=filters,
    )


class PaginationExtractor:
    """Callable bound to one :class:`PaginationConfig`.

    Holds no per-request state, so a single instance is shared by every
    request the server handles.
    """

    def __init__(self, config: PaginationConfig | None = None) -> None:
        self._config = config or DEFAULT_PAGINATION_CONFIG

    @property
    def config(self) -> PaginationConfig:
        return self._config

    def __call__(self, query_params: Mapping[str, Any]) -> FilterRequest:
        return extract_pagination(query_params, self._config)
