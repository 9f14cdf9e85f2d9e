"""Page requests, page results and pagination response headers."""

import math
from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from fastapi import Query

from app.core.config import settings

T = TypeVar("T")

Direction = Literal["asc", "desc"]


@dataclass(frozen=True)
class Order:
    """Sort order on a single property."""

    property: str
    direction: Direction = "asc"


@dataclass(frozen=True)
class Pageable:
    """Zero-based page request with optional sort orders."""

    page: int = 0
    size: int = 20
    sort: tuple[Order, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of results plus the size of the whole result set."""

    content: list[T]
    number: int
    size: int
    total_elements: int
    sort: tuple[Order, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1

    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    def has_previous(self) -> bool:
        return self.number > 0


def parse_sort(values: list[str] | None) -> tuple[Order, ...]:
    """Parse ``property[,property...][,asc|desc]`` sort parameters.

    A trailing ``asc``/``desc`` token applies to every property listed
    before it in the same parameter.
    """
    orders: list[Order] = []
    for value in values or []:
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        direction: Direction = "asc"
        if tokens and tokens[-1].lower() in ("asc", "desc"):
            direction = "desc" if tokens.pop().lower() == "desc" else "asc"
        orders.extend(Order(prop, direction) for prop in tokens)
    return tuple(orders)


def get_pageable(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int | None = Query(None, ge=1, description="Page size"),
    sort: list[str] | None = Query(None, description="Sort criteria: property[,asc|desc]"),
) -> Pageable:
    """Dependency building a Pageable from the page/size/sort query parameters."""
    page_size = min(size or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return Pageable(page=page, size=page_size, sort=parse_sort(sort))


def _page_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?page={page}&size={size}"


def generate_pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    """X-Total-Count and Link (next, prev, last, first) headers for a page."""
    links = []
    if page.has_next():
        links.append(f'<{_page_uri(base_url, page.number + 1, page.size)}>; rel="next"')
    if page.has_previous():
        links.append(f'<{_page_uri(base_url, page.number - 1, page.size)}>; rel="prev"')
    last_page = max(page.total_pages - 1, 0)
    links.append(f'<{_page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_url, 0, page.size)}>; rel="first"')
    return {
        "X-Total-Count": str(page.total_elements),
        "Link": ",".join(links),
    }
