"""Paged list results and an async iterator that follows ``x-next-page``."""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from gitness.schemas.common import ListOptions

if TYPE_CHECKING:
    from gitness.client import Response

_T = TypeVar("_T")


@dataclass
class Page(Generic[_T]):
    """One page of a list endpoint.

    ``page``, ``per_page``, ``next_page``, ``total`` and ``total_pages`` come
    from the response headers and are ``None`` when the server omits them.
    """

    items: list[_T]
    response: "Response | None" = None
    page: int | None = None
    per_page: int | None = None
    next_page: int | None = None
    total: int | None = None
    total_pages: int | None = None

    @classmethod
    def from_response(cls, items: list[_T], response: "Response") -> "Page[_T]":
        return cls(
            items=items,
            response=response,
            page=response.page,
            per_page=response.per_page,
            next_page=response.next_page,
            total=response.total,
            total_pages=response.total_pages,
        )

    def __iter__(self) -> Iterator[_T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> _T:
        return self.items[index]


async def paginate(
    list_method: Callable[..., Awaitable[Page[_T]]],
    *args: Any,
    options: ListOptions | None = None,
    start_page: int = 1,
) -> AsyncIterator[_T]:
    """Yield every item of a list endpoint, one request per page.

    ``list_method`` is a bound service method whose last positional argument
    is a ``ListOptions`` (or subclass); ``args`` are the leading identifiers.
    Iteration stops on an empty page or when ``x-next-page`` is missing or
    does not advance.

    Raises:
        TypeError: ``options`` is not a ``ListOptions``, so it has no ``page``
            field to advance.
    """
    options = options or ListOptions()
    if not isinstance(options, ListOptions):
        raise TypeError(f"paginate needs ListOptions with a page field, got {type(options).__name__}")
    page_number = start_page
    while True:
        page = await list_method(*args, options.model_copy(update={"page": page_number}))
        for item in page.items:
            yield item
        if not page.items or not page.next_page or page.next_page <= page_number:
            return
        page_number = page.next_page
