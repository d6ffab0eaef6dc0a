"""
Offset pagination primitives: Sort, PageRequest and Page.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Invalid sort direction: {value}") from None


@dataclass(frozen=True)
class Order:
    property: str
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class Sort:
    """Ordered list of (property, direction) pairs."""
    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, direction: Direction, *properties: str) -> "Sort":
        return cls(tuple(Order(p, direction) for p in properties))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @classmethod
    def parse(cls, expressions: List[str]) -> "Sort":
        """Parse query-string style expressions, e.g. ["username,desc", "age"]."""
        orders = []
        for expr in expressions:
            name, _, direction = expr.partition(",")
            orders.append(Order(name.strip(), Direction.from_string(direction.strip() or "asc")))
        return cls(tuple(orders))

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page request."""
    page: int
    size: int
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @classmethod
    def of(cls, page: int, size: int, sort: Optional[Sort] = None) -> "PageRequest":
        return cls(page=page, size=size, sort=sort or Sort.unsorted())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size, self.sort)


class Page(Generic[T]):
    """A slice of results plus the total row count from a separate count query."""

    def __init__(self, content: List[T], page_request: PageRequest, total_elements: int):
        self.content = list(content)
        self.pageable = page_request
        self.total_elements = total_elements

    @property
    def number(self) -> int:
        return self.pageable.page

    @property
    def size(self) -> int:
        return self.pageable.size

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size)

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, converter: Callable[[T], R]) -> "Page[R]":
        return Page([converter(item) for item in self.content], self.pageable, self.total_elements)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "number": self.number,
            "size": self.size,
            "total_elements": self.total_elements,
            "total_pages": self.total_pages,
            "is_first": self.is_first,
            "is_last": self.is_last,
            "has_next": self.has_next,
        }

    def __iter__(self):
        return iter(self.content)

    def __len__(self):
        return len(self.content)

    def __repr__(self):
        return f"Page {self.number + 1} of {self.total_pages} containing {self.number_of_elements} instances"
