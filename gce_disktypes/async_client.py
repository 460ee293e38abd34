"""Asynchronous Compute Engine disk-types client.

Provides ``ComputeAsyncClient``, an async wrapper around the Compute
Engine v1 ``diskTypes`` REST collection using :mod:`httpx` with
``AsyncClient``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from gce_disktypes.client import build_headers, handle_response, log_request, project_url
from gce_disktypes.config import DEFAULT_BASE_URL, ClientConfig
from gce_disktypes.namespaces import AsyncDiskTypesNamespace

if TYPE_CHECKING:
    from gce_disktypes.endpoints import Endpoint


class ComputeAsyncClient:
    """Asynchronous client for the Compute Engine disk-types API.

    Usage::

        import asyncio
        from gce_disktypes import ComputeAsyncClient

        async def main():
            async with ComputeAsyncClient("my-project", token="ya29...") as client:
                async for disk_type in client.disk_types.list_in_zone("us-central1-a"):
                    print(disk_type.name)

        asyncio.run(main())

    Args:
        project: Project whose resources are addressed.
        token: Optional OAuth bearer token with the
            ``compute.readonly`` scope.
        base_url: Root URL of the Compute Engine API.
        timeout: HTTP request timeout in seconds. Defaults to 30.
    """

    def __init__(
        self,
        project: str,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        self._project = project
        self._base_url = project_url(base_url, project)
        self._token: str | None = token
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
        )

        # Namespace accessors
        self.disk_types = AsyncDiskTypesNamespace(self)

    @classmethod
    def from_config(cls, config: ClientConfig) -> ComputeAsyncClient:
        """Create a client from a :class:`ClientConfig`."""
        return cls(
            config.project,
            token=config.token,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    # -- Context manager ----------------------------------------------------

    async def __aenter__(self) -> ComputeAsyncClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying async HTTP connection pool."""
        await self._http.aclose()

    # -- Authentication -----------------------------------------------------

    def set_token(self, token: str) -> None:
        """Manually set the bearer token for subsequent requests.

        Args:
            token: The bearer token string.
        """
        self._token = token

    # -- Internal HTTP helpers ----------------------------------------------

    async def _request(
        self,
        endpoint: Endpoint,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send the async request described by ``endpoint``."""
        log_request(endpoint, self._base_url, path, params)
        response = await self._http.request(
            endpoint.method, path, params=params, headers=build_headers(self._token)
        )
        return handle_response(response)
