"""Transport protocol definitions for namespace type checking.

These protocols define the internal HTTP method signatures that namespace
classes depend on. They are used only for static type checking and are
not instantiated at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from gce_disktypes.endpoints import Endpoint


class SyncTransport(Protocol):
    """Protocol for synchronous HTTP transport methods."""

    def _request(
        self,
        endpoint: Endpoint,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any: ...


class AsyncTransport(Protocol):
    """Protocol for asynchronous HTTP transport methods."""

    async def _request(
        self,
        endpoint: Endpoint,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any: ...
