"""Tests for the lazy auto-paginating sequences."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

from helpers import LIST_URL, ZONE, list_json, not_found_json
from gce_disktypes import (
    AsyncPagedIterable,
    ComputeAsyncClient,
    ComputeClient,
    ComputeError,
    ListOptions,
    ListPage,
    PagedIterable,
)

THREE_PAGES = {
    None: list_json(["local-ssd", "pd-balanced"], next_page_token="t1"),
    "t1": list_json(["pd-extreme", "pd-ssd"], next_page_token="t2"),
    "t2": list_json(["pd-standard"]),
}


def _serve(pages: dict) -> object:
    """Side effect answering each request with the page for its token."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=pages[request.url.params.get("pageToken")])

    return handler


def _first_page_then_not_found(request: httpx.Request) -> httpx.Response:
    if request.url.params.get("pageToken") == "t1":
        return httpx.Response(404, json=not_found_json())
    return httpx.Response(200, json=THREE_PAGES[None])


class TestPagedIterable:
    """Verify the sync lazy sequence."""

    @respx.mock
    def test_no_request_until_iterated(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        items = client.disk_types.list_in_zone(ZONE)

        assert isinstance(items, PagedIterable)
        assert route.call_count == 0

    @respx.mock
    def test_three_pages_in_order(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        names = [d.name for d in client.disk_types.list_in_zone(ZONE)]

        assert names == [
            "local-ssd",
            "pd-balanced",
            "pd-extreme",
            "pd-ssd",
            "pd-standard",
        ]
        assert route.call_count == 3
        tokens = [c.request.url.params.get("pageToken") for c in route.calls]
        assert tokens == [None, "t1", "t2"]

    @respx.mock
    def test_pages(self, client: ComputeClient) -> None:
        respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        pages = list(client.disk_types.list_in_zone(ZONE).pages())

        assert [len(p) for p in pages] == [2, 2, 1]
        assert pages[-1].next_page_token is None

    @respx.mock
    def test_fetches_only_what_is_consumed(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        it = iter(client.disk_types.list_in_zone(ZONE))
        next(it)
        next(it)

        assert route.call_count == 1

        next(it)
        assert route.call_count == 2

    @respx.mock
    def test_restart_fetches_again(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        items = client.disk_types.list_in_zone(ZONE)
        assert len(list(items)) == 5
        assert len(list(items)) == 5
        assert route.call_count == 6

    @respx.mock
    def test_options_sent_on_every_page(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        list(client.disk_types.list_in_zone(ZONE, ListOptions(max_results=2)))

        assert all(c.request.url.params["maxResults"] == "2" for c in route.calls)

    @respx.mock
    def test_not_found_is_empty(self, client: ComputeClient) -> None:
        route = respx.get(LIST_URL).mock(
            return_value=httpx.Response(404, json=not_found_json())
        )

        assert list(client.disk_types.list_in_zone(ZONE)) == []
        assert route.call_count == 1

    @respx.mock
    def test_empty_zone(self, client: ComputeClient) -> None:
        respx.get(LIST_URL).mock(return_value=httpx.Response(200, json=list_json([])))

        assert list(client.disk_types.list_in_zone(ZONE)) == []

    @respx.mock
    def test_error_on_later_page_propagates(self, client: ComputeClient) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("pageToken") == "t1":
                return httpx.Response(503, json={"error": {"message": "Unavailable"}})
            return httpx.Response(200, json=THREE_PAGES[None])

        respx.get(LIST_URL).mock(side_effect=handler)

        with pytest.raises(ComputeError) as exc_info:
            list(client.disk_types.list_in_zone(ZONE))

        assert exc_info.value.status == 503

    @respx.mock
    def test_not_found_on_later_page_ends_sequence(
        self, client: ComputeClient
    ) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_first_page_then_not_found)

        names = [d.name for d in client.disk_types.list_in_zone(ZONE)]

        assert names == ["local-ssd", "pd-balanced"]
        assert route.call_count == 2

    def test_empty_zone_rejected_eagerly(self, client: ComputeClient) -> None:
        with pytest.raises(ValueError):
            client.disk_types.list_in_zone("")

    def test_repeated_token_stops(self, caplog: pytest.LogCaptureFixture) -> None:
        calls: list[str | None] = []

        def fetch(marker: str | None) -> ListPage:
            calls.append(marker)
            return ListPage(items=[marker or "first"], nextPageToken="same")

        with caplog.at_level(logging.WARNING, logger="gce_disktypes"):
            items = list(PagedIterable(fetch))

        assert items == ["first", "same"]
        assert calls == [None, "same"]
        assert "repeated page token" in caplog.text


class TestAsyncPagedIterable:
    """Verify the async lazy sequence."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_three_pages(self, async_client: ComputeAsyncClient) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        items = async_client.disk_types.list_in_zone(ZONE)
        assert isinstance(items, AsyncPagedIterable)
        assert route.call_count == 0

        names = [d.name async for d in items]

        assert names == [
            "local-ssd",
            "pd-balanced",
            "pd-extreme",
            "pd-ssd",
            "pd-standard",
        ]
        assert route.call_count == 3

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_pages_and_to_list(
        self, async_client: ComputeAsyncClient
    ) -> None:
        respx.get(LIST_URL).mock(side_effect=_serve(THREE_PAGES))

        items = async_client.disk_types.list_in_zone(ZONE)
        pages = [p async for p in items.pages()]
        everything = await items.to_list()

        assert [len(p) for p in pages] == [2, 2, 1]
        assert len(everything) == 5

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_not_found_is_empty(
        self, async_client: ComputeAsyncClient
    ) -> None:
        respx.get(LIST_URL).mock(
            return_value=httpx.Response(404, json=not_found_json())
        )

        assert await async_client.disk_types.list_in_zone(ZONE).to_list() == []

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_not_found_on_later_page_ends_sequence(
        self, async_client: ComputeAsyncClient
    ) -> None:
        route = respx.get(LIST_URL).mock(side_effect=_first_page_then_not_found)

        items = await async_client.disk_types.list_in_zone(ZONE).to_list()

        assert [d.name for d in items] == ["local-ssd", "pd-balanced"]
        assert route.call_count == 2
