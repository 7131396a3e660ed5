# app/repositories/paging.py
"""
Page requests and page results for paginated queries.
A PageRequest is zero-based; Page carries the slice plus total-count metadata.
"""

import enum
import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from app.services.exceptions import InvalidSortError

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_string(cls, value: str) -> "SortDirection":
        """Case-insensitive parse of 'asc' / 'desc'."""
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidSortError(value, "direction must be 'asc' or 'desc'")


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 2
    sort_field: str = "id"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_sort_params(cls, page: int, size: int, sort: list[str]) -> "PageRequest":
        """
        Build a request from the raw `sort` query values.
        Accepts ["model,desc"] as well as ["model", "desc"]; direction defaults to ascending.
        """
        parts = [p.strip() for value in sort for p in value.split(",") if p.strip()]
        if not parts:
            return cls(page=page, size=size)
        direction = SortDirection.from_string(parts[1]) if len(parts) > 1 else SortDirection.ASC
        return cls(page=page, size=size, sort_field=parts[0], direction=direction)


@dataclass
class Page(Generic[T]):
    content: list[T]
    total_elements: int
    request: PageRequest = field(default_factory=PageRequest)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.request.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.request.page == 0

    @property
    def last(self) -> bool:
        return self.request.page + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """New page with fn applied to each element; metadata is preserved."""
        return Page(content=[fn(item) for item in self.content],
                    total_elements=self.total_elements,
                    request=self.request)
