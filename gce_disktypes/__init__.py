"""Compute Engine disk-types Python client.

Provides synchronous and asynchronous clients for listing and fetching
the disk types offered in a Compute Engine zone.

Quick start::

    from gce_disktypes import ComputeClient

    client = ComputeClient("my-project", token="ya29...")
    page = client.disk_types.list_first_page_in_zone("us-central1-a")
    print([disk_type.name for disk_type in page])

For async usage::

    from gce_disktypes import ComputeAsyncClient

    async def main():
        async with ComputeAsyncClient("my-project", token="ya29...") as client:
            disk_type = await client.disk_types.get_in_zone("us-central1-a", "pd-ssd")
"""

from __future__ import annotations

from gce_disktypes.async_client import ComputeAsyncClient
from gce_disktypes.client import ComputeClient
from gce_disktypes.config import ClientConfig, load_config
from gce_disktypes.exceptions import ComputeError, ConfigError
from gce_disktypes.models import Deprecated, DiskType, ListPage
from gce_disktypes.options import DEFAULT_MAX_RESULTS, ListOptions
from gce_disktypes.pagination import AsyncPagedIterable, PagedIterable

__all__ = [
    "ComputeClient",
    "ComputeAsyncClient",
    "ComputeError",
    "ConfigError",
    "ClientConfig",
    "load_config",
    "DiskType",
    "Deprecated",
    "ListPage",
    "ListOptions",
    "DEFAULT_MAX_RESULTS",
    "PagedIterable",
    "AsyncPagedIterable",
]

__version__ = "0.1.0"
