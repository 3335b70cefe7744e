"""Pagination helpers for list endpoints.

The ranking engine returns the full ordered view; slicing it into pages is
purely an HTTP concern and happens here.
"""

from collections.abc import Sequence
from typing import TypeVar

from fastapi import Query
from pydantic import BaseModel

from partnerlink.core.config import settings

T = TypeVar("T")


class PaginationParams:
    """FastAPI dependency for `?page=1&limit=20`."""

    def __init__(
        self,
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        limit: int = Query(
            default=settings.default_page_limit, ge=1, le=200, description="Items per page"
        ),
    ):
        self.page = page
        self.limit = limit

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def slice(self, items: Sequence[T]) -> list[T]:
        return list(items[self.offset : self.offset + self.limit])


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int

    model_config = {"populate_by_name": True}
