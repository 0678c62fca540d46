import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10


@dataclass(frozen=True)
class Page(Generic[T]):
    number: int
    total_pages: int
    items: list[T]

    @property
    def has_prev(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int = PAGE_SIZE) -> int:
    return min(max(1, page), total_pages(count, page_size))


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> Page[T]:
    """Slice ``items`` for the 1-based ``page``, clamped to the available range."""
    number = clamp_page(page, len(items), page_size)
    start = (number - 1) * page_size
    return Page(number, total_pages(len(items), page_size), list(items[start:start + page_size]))
