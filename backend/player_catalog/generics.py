"""Generic type definitions for reusable components."""

from dataclasses import dataclass
from typing import Generic, List, TypeVar

# Generic type variables
T = TypeVar("T")


@dataclass
class PaginatedResult(Generic[T]):
    """Generic paginated result container."""

    items: List[T]
    total: int
    page: int
    size: int
    pages: int

    @classmethod
    def create(
        cls, items: List[T], total: int, page: int, size: int
    ) -> "PaginatedResult[T]":
        """Create a paginated result."""
        pages = (total + size - 1) // size if size > 0 else 0
        return cls(items=items, total=total, page=page, size=size, pages=pages)

    @property
    def is_first(self) -> bool:
        """Whether this is the first page (pages are zero-based)."""
        return self.page == 0

    @property
    def is_last(self) -> bool:
        """Whether no page follows this one."""
        return self.page + 1 >= self.pages
