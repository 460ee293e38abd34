"""Lazy, auto-paginating sequences over list operations.

Nothing is fetched when a sequence is created. Each page is requested only
when iteration reaches it, and iteration ends after the first page that
carries no ``nextPageToken``. Iterating again starts over from the first
page with fresh requests.

Usage::

    for disk_type in client.disk_types.list_in_zone("us-central1-a"):
        print(disk_type.name)
"""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Generic, Iterator, TypeVar

from gce_disktypes.logger import get_logger
from gce_disktypes.models import ListPage

T = TypeVar("T")

logger = get_logger(__name__)


def _next_marker(page: ListPage, marker: str | None) -> str | None:
    token = page.next_page_token
    if not token:
        return None
    if token == marker:
        logger.warning("Server repeated page token %r; stopping pagination", token)
        return None
    return token


class PagedIterable(Generic[T]):
    """Synchronous lazy sequence of items across all pages."""

    def __init__(self, fetch_page: Callable[[str | None], ListPage[T]]) -> None:
        self._fetch_page = fetch_page

    def pages(self) -> Iterator[ListPage[T]]:
        """Yield whole pages, fetching each one on demand."""
        marker: str | None = None
        while True:
            page = self._fetch_page(marker)
            yield page
            marker = _next_marker(page, marker)
            if marker is None:
                return

    def __iter__(self) -> Iterator[T]:
        for page in self.pages():
            yield from page.items


class AsyncPagedIterable(Generic[T]):
    """Asynchronous lazy sequence of items across all pages."""

    def __init__(
        self, fetch_page: Callable[[str | None], Awaitable[ListPage[T]]]
    ) -> None:
        self._fetch_page = fetch_page

    async def pages(self) -> AsyncIterator[ListPage[T]]:
        """Yield whole pages, fetching each one on demand."""
        marker: str | None = None
        while True:
            page = await self._fetch_page(marker)
            yield page
            marker = _next_marker(page, marker)
            if marker is None:
                return

    async def _items(self) -> AsyncIterator[T]:
        async for page in self.pages():
            for item in page.items:
                yield item

    def __aiter__(self) -> AsyncIterator[T]:
        return self._items()

    async def to_list(self) -> list[T]:
        """Fetch every page and return all items in order."""
        return [item async for item in self]
