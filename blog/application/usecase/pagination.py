"""Pagination view shared by the list use cases."""

from pydantic import BaseModel

from blog.domain.model.common import Page


class PaginationView(BaseModel):
    """Pagination totals for a list response."""

    total: int
    page: int
    per_page: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationView":
        return cls(
            total=page.total,
            page=page.page,
            per_page=page.per_page,
            total_pages=page.total_pages,
        )
