"""Namespace classes for the disk-types client.

Each namespace groups related API endpoints and delegates HTTP calls
to the parent client's internal transport methods. Not-found responses
are turned into benign results here: ``None`` for a single lookup and an
empty page or sequence for listings. Every other error propagates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gce_disktypes.endpoints import GET_DISK_TYPE, LIST_DISK_TYPES, build_list_params
from gce_disktypes.exceptions import ComputeError
from gce_disktypes.logger import get_logger
from gce_disktypes.models import DiskType, ListPage
from gce_disktypes.options import ListOptions
from gce_disktypes.pagination import AsyncPagedIterable, PagedIterable

if TYPE_CHECKING:
    from gce_disktypes._transport import AsyncTransport, SyncTransport

logger = get_logger(__name__)


def _parse_disk_type(data: Any) -> DiskType:
    return DiskType.model_validate(data)


def _parse_disk_types(data: Any) -> ListPage[DiskType]:
    return ListPage[DiskType].model_validate(data)


def _not_found(exc: ComputeError, what: str) -> bool:
    if exc.is_not_found:
        logger.debug("%s not found, using fallback: %s", what, exc)
        return True
    return False


# ---------------------------------------------------------------------------
# Sync namespaces
# ---------------------------------------------------------------------------


class DiskTypesNamespace:
    """Disk type endpoints, scoped to a zone."""

    def __init__(self, transport: SyncTransport) -> None:
        self._t = transport

    def get_in_zone(self, zone: str, disk_type: str) -> DiskType | None:
        """Get a disk type by name, or ``None`` if it does not exist.

        Args:
            zone: Name of the zone the disk type is in.
            disk_type: Name of the disk type resource.

        Raises:
            ValueError: If ``zone`` or ``disk_type`` is empty.
            ComputeError: For any failure other than not-found.
        """
        path = GET_DISK_TYPE.path(zone=zone, diskType=disk_type)
        try:
            data = self._t._request(GET_DISK_TYPE, path)
        except ComputeError as e:
            if _not_found(e, f"disk type {zone}/{disk_type}"):
                return None
            raise
        return _parse_disk_type(data)

    def list_first_page_in_zone(self, zone: str) -> ListPage[DiskType]:
        """Get the first page of disk types in a zone."""
        return self.list_at_marker_in_zone(zone)

    def list_at_marker_in_zone(
        self,
        zone: str,
        marker: str | None = None,
        options: ListOptions | None = None,
    ) -> ListPage[DiskType]:
        """Get the page of disk types that begins at ``marker``.

        Without ``options`` no ``maxResults`` is sent and the service picks
        the page size.

        Args:
            zone: Name of the zone to list in.
            marker: Continuation marker from a previous page, or ``None``
                for the first page.
            options: Listing options.

        Returns:
            The page, or an empty page if the zone is not found.
        """
        path = LIST_DISK_TYPES.path(zone=zone)
        try:
            data = self._t._request(
                LIST_DISK_TYPES, path, params=build_list_params(marker, options)
            )
        except ComputeError as e:
            if _not_found(e, f"disk types in {zone}"):
                return ListPage[DiskType].empty()
            raise
        return _parse_disk_types(data)

    def list_in_zone(
        self, zone: str, options: ListOptions | None = None
    ) -> PagedIterable[DiskType]:
        """Lazily iterate over every disk type in a zone, page by page."""
        LIST_DISK_TYPES.path(zone=zone)
        return PagedIterable(
            lambda marker: self.list_at_marker_in_zone(zone, marker, options)
        )


# ---------------------------------------------------------------------------
# Async namespaces
# ---------------------------------------------------------------------------


class AsyncDiskTypesNamespace:
    """Async disk type endpoints, scoped to a zone."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._t = transport

    async def get_in_zone(self, zone: str, disk_type: str) -> DiskType | None:
        """Get a disk type by name, or ``None`` if it does not exist."""
        path = GET_DISK_TYPE.path(zone=zone, diskType=disk_type)
        try:
            data = await self._t._request(GET_DISK_TYPE, path)
        except ComputeError as e:
            if _not_found(e, f"disk type {zone}/{disk_type}"):
                return None
            raise
        return _parse_disk_type(data)

    async def list_first_page_in_zone(self, zone: str) -> ListPage[DiskType]:
        """Get the first page of disk types in a zone."""
        return await self.list_at_marker_in_zone(zone)

    async def list_at_marker_in_zone(
        self,
        zone: str,
        marker: str | None = None,
        options: ListOptions | None = None,
    ) -> ListPage[DiskType]:
        """Get the page of disk types that begins at ``marker``."""
        path = LIST_DISK_TYPES.path(zone=zone)
        try:
            data = await self._t._request(
                LIST_DISK_TYPES, path, params=build_list_params(marker, options)
            )
        except ComputeError as e:
            if _not_found(e, f"disk types in {zone}"):
                return ListPage[DiskType].empty()
            raise
        return _parse_disk_types(data)

    def list_in_zone(
        self, zone: str, options: ListOptions | None = None
    ) -> AsyncPagedIterable[DiskType]:
        """Lazily iterate over every disk type in a zone with ``async for``."""
        LIST_DISK_TYPES.path(zone=zone)
        return AsyncPagedIterable(
            lambda marker: self.list_at_marker_in_zone(zone, marker, options)
        )
