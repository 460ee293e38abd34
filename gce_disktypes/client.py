"""Synchronous Compute Engine disk-types client.

Provides ``ComputeClient``, a fully synchronous wrapper around the
Compute Engine v1 ``diskTypes`` REST collection using :mod:`httpx`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from gce_disktypes.config import DEFAULT_BASE_URL, ClientConfig
from gce_disktypes.exceptions import ComputeError
from gce_disktypes.logger import get_logger
from gce_disktypes.namespaces import DiskTypesNamespace

if TYPE_CHECKING:
    from gce_disktypes.endpoints import Endpoint

logger = get_logger(__name__)


def log_request(
    endpoint: Endpoint, base_url: str, path: str, params: dict[str, Any] | None
) -> None:
    logger.debug(
        "%s %s %s%s params=%s scope=%s",
        endpoint.name,
        endpoint.method,
        base_url,
        path,
        params,
        endpoint.scope,
    )


def project_url(base_url: str, project: str) -> str:
    """Root URL that every request path of ``project`` is relative to."""
    if not project:
        raise ValueError("project must be a non-empty string")
    return f"{base_url.rstrip('/')}/projects/{project}"


def build_headers(token: str | None) -> dict[str, str]:
    """Build common request headers."""
    headers: dict[str, str] = {"Accept": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def handle_response(response: httpx.Response) -> Any:
    """Process an HTTP response, raising on errors.

    Error bodies follow the Google API envelope::

        {"error": {"code": 404, "message": "...",
                   "errors": [{"reason": "notFound", ...}]}}

    Raises:
        ComputeError: If the response status is not 2xx.
    """
    if not response.is_success:
        try:
            parsed = response.json()
        except ValueError:
            parsed = None

        error = parsed.get("error") if isinstance(parsed, dict) else None
        if not isinstance(error, dict):
            error = {}

        message = (
            error.get("message")
            or f"HTTP {response.status_code}: {response.reason_phrase}"
        )

        reasons = error.get("errors")
        code = None
        if isinstance(reasons, list) and reasons and isinstance(reasons[0], dict):
            code = reasons[0].get("reason")
        code = code or f"HTTP_{response.status_code}"

        raise ComputeError(message, code=code, status=response.status_code)

    return response.json()


class ComputeClient:
    """Synchronous client for the Compute Engine disk-types API.

    Usage::

        from gce_disktypes import ComputeClient

        client = ComputeClient("my-project", token="ya29...")
        disk_type = client.disk_types.get_in_zone("us-central1-a", "pd-ssd")

    The client manages its own :class:`httpx.Client` instance. Use it as a
    context manager to ensure the underlying connection pool is closed
    promptly::

        with ComputeClient("my-project", token="ya29...") as client:
            for disk_type in client.disk_types.list_in_zone("us-central1-a"):
                print(disk_type.name)

    Args:
        project: Project whose resources are addressed.
        token: Optional OAuth bearer token with the
            ``compute.readonly`` scope. Can also be set later via
            :meth:`set_token`.
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
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
        )

        # Namespace accessors
        self.disk_types = DiskTypesNamespace(self)

    @classmethod
    def from_config(cls, config: ClientConfig) -> ComputeClient:
        """Create a client from a :class:`ClientConfig`."""
        return cls(
            config.project,
            token=config.token,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    # -- Context manager ----------------------------------------------------

    def __enter__(self) -> ComputeClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    # -- Authentication -----------------------------------------------------

    def set_token(self, token: str) -> None:
        """Manually set the bearer token for subsequent requests.

        Args:
            token: The bearer token string.
        """
        self._token = token

    # -- Internal HTTP helpers ----------------------------------------------

    def _request(
        self,
        endpoint: Endpoint,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send the request described by ``endpoint``."""
        log_request(endpoint, self._base_url, path, params)
        response = self._http.request(
            endpoint.method, path, params=params, headers=build_headers(self._token)
        )
        return handle_response(response)
