from domain.models.config import DEFAULT_PAGINATION_CONFIG, PaginationConfig, default_skipper
from domain.models.pagination import Filter, FilterRequest, PageRequest

__all__ = [
    "DEFAULT_PAGINATION_CONFIG",
    "Filter",
    "FilterRequest",
    "PageRequest",
    "PaginationConfig",
    "default_skipper",
]
