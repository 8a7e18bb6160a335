from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class PaginationConfigError(DomainException):
    """Raised while building a :class:`PaginationConfig` with inconsistent bounds.

    Only ever raised at setup time; request handling never sees it.
    """

    def __init__(self, field_name: str = "", reason: str = "") -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(
            detail=f"Invalid pagination setting '{field_name}': {reason}",
            title="Invalid Pagination Configuration",
            status_code=500,
            error_type="https://api.query-pagination.example/problems/invalid-config",
        )
