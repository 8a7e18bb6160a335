"""Immutable configuration for query-string pagination extraction.

``PaginationConfig`` describes which query keys to read, their defaults and
bounds, where the parsed result is stored on the request, and an optional
predicate that bypasses extraction.  Unset fields are filled with defaults
once, at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Optional

from domain.exceptions import PaginationConfigError

if TYPE_CHECKING:
    from collections.abc import Callable

    from infrastructure.settings import PaginationSettings

PAGE_PARAMETER: str = "page"
PAGE_DEFAULT: int = 1
PAGE_MAX: int = 9999
PAGE_SIZE_PARAMETER: str = "pageSize"
PAGE_SIZE_DEFAULT: int = 20
PAGE_SIZE_MIN: int = 2
PAGE_SIZE_MAX: int = 1000
SORT_PARAMETER: str = "sort"
FILTER_PARAMETER: str = "filter"
CONTEXT_KEY: str = "pagination"


def default_skipper(request: Any) -> bool:
    """Never skip: extraction runs for every request."""
    return False


_DEFAULTS: dict[str, Any] = {
    "page_parameter": PAGE_PARAMETER,
    "page_default": PAGE_DEFAULT,
    "page_max": PAGE_MAX,
    "page_size_parameter": PAGE_SIZE_PARAMETER,
    "page_size_default": PAGE_SIZE_DEFAULT,
    "page_size_min": PAGE_SIZE_MIN,
    "page_size_max": PAGE_SIZE_MAX,
    "sort_parameter": SORT_PARAMETER,
    "filter_parameter": FILTER_PARAMETER,
    "context_key": CONTEXT_KEY,
    "skipper": default_skipper,
}


@dataclass(frozen=True)
class PaginationConfig:
    """Per-server pagination settings.

    Any field left as ``None`` (or given as an empty string or ``0``) is
    replaced by its module-level default, so ``PaginationConfig(page_max=50)``
    is a complete configuration.

    Raises:
        PaginationConfigError: If ``page_default`` exceeds ``page_max`` or
            ``page_size_min`` exceeds ``page_size_max``.
    """

    page_parameter: Optional[str] = None
    page_default: Optional[int] = None
    page_max: Optional[int] = None
    page_size_parameter: Optional[str] = None
    page_size_default: Optional[int] = None
    page_size_min: Optional[int] = None
    page_size_max: Optional[int] = None
    sort_parameter: Optional[str] = None
    filter_parameter: Optional[str] = None
    context_key: Optional[str] = None
    skipper: Optional[Callable[[Any], bool]] = None

    def __post_init__(self) -> None:
        # frozen=True requires object.__setattr__ for default fixups
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "" or value == 0:
                object.__setattr__(self, f.name, _DEFAULTS[f.name])

        if self.page_default > self.page_max:
            raise PaginationConfigError(
                "page_default",
                f"{self.page_default} is greater than page_max {self.page_max}",
            )
        if self.page_size_min > self.page_size_max:
            raise PaginationConfigError(
                "page_size_min",
                f"{self.page_size_min} is greater than page_size_max {self.page_size_max}",
            )

    @classmethod
    def from_settings(
        cls,
        settings: PaginationSettings,
        skipper: Optional[Callable[[Any], bool]] = None,
    ) -> PaginationConfig:
        """Build a config from environment-backed settings."""
        return cls(
            page_parameter=settings.page_parameter,
            page_default=settings.page_default,
            page_max=settings.page_max,
            page_size_parameter=settings.page_size_parameter,
            page_size_default=settings.page_size_default,
            page_size_min=settings.page_size_min,
            page_size_max=settings.page_size_max,
            sort_parameter=settings.sort_parameter,
            filter_parameter=settings.filter_parameter,
            context_key=settings.context_key,
            skipper=skipper,
        )


DEFAULT_PAGINATION_CONFIG = PaginationConfig()
