"""Base service class for domain services."""

from blog.domain.error import ValidationError

DEFAULT_PER_PAGE = 20
MAX_PER_PAGE = 100


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def validate_pagination(
    page: int,
    per_page: int | None,
    default_per_page: int = DEFAULT_PER_PAGE,
    max_per_page: int = MAX_PER_PAGE,
) -> int:
    """Validate pagination parameters and return the effective page size.

    Raises:
        ValidationError: If page is below 1 or per_page is out of range
    """
    if per_page is None:
        per_page = default_per_page
    if page < 1:
        raise ValidationError("Page must be at least 1")
    if not 1 <= per_page <= max_per_page:
        raise ValidationError(f"per_page must be between 1 and {max_per_page}")
    return per_page
