from domain.exceptions.pagination_exceptions import (
    DomainException,
    PaginationConfigError,
)

__all__ = [
    "DomainException",
    "PaginationConfigError",
]
