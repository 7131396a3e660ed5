# app/schemas/page.py
"""Spring-style page envelope returned by the paginated listing endpoint."""

from pydantic import BaseModel, Field
from typing import Generic, TypeVar

T = TypeVar("T")


class SortOut(BaseModel):
    property: str
    direction: str           # ASC | DESC


class PageOut(BaseModel, Generic[T]):
    content: list[T]
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
    size: int
    number: int
    number_of_elements: int = Field(alias="numberOfElements")
    first: bool
    last: bool
    empty: bool
    sort: SortOut

    class Config:
        populate_by_name = True

    @classmethod
    def from_page(cls, page):
        """Build the envelope from a repositories.paging.Page."""
        request = page.request
        return cls(
            content=page.content,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            size=request.size,
            number=request.page,
            number_of_elements=page.number_of_elements,
            first=page.first,
            last=page.last,
            empty=page.empty,
            sort=SortOut(property=request.sort_field, direction=request.direction.value),
        )
