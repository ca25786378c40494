"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

ItemT = TypeVar("ItemT")


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class Page(BaseModel, Generic[ItemT]):
    """A page of items with pagination totals."""

    items: list[ItemT]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show all items."""
        return (self.total + self.per_page - 1) // self.per_page


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
