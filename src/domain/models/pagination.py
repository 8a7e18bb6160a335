from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class PageRequest:
    """Page window requested by the client.

    ``page`` is 1-based.  Bounds are enforced by the extractor, not here.
    """

    page: int
    size: int
    sort: str = ""

    @property
    def offset(self) -> int:
        """Zero-based offset suitable for SQL ``OFFSET`` clauses."""
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


@dataclass
class Filter:
    """A named filter and its criterion objects.

    Each item is an open JSON mapping such as ``{"gte": "...", "lte": "..."}``
    and is carried through untouched.
    """

    name: str
    items: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class FilterRequest:
    """Pagination result handed to downstream handlers."""

    page_request: PageRequest
    filters: list[Filter] = field(default_factory=list)

    def add_filter(self, filter_: Filter) -> None:
        self.filters.append(filter_)

    def get_filter_by_name(self, name: str) -> Optional[Filter]:
        """Return the first filter called *name*, or ``None``.

        The returned object is the one held in :attr:`filters`, so changes to
        it are visible through this request.
        """
        for filter_ in self.filters:
            if filter_.name == name:
                return filter_
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page_request.page,
            "size": self.page_request.size,
            "offset": self.page_request.offset,
            "sort": self.page_request.sort,
            "filters": [{"name": f.name, "items": f.items} for f in self.filters],
        }
