"""Request templates for the ``diskTypes`` collection.

Each :class:`Endpoint` records what a call sends: the API method name, the
HTTP verb, the path template relative to the project URL, and the OAuth
scope the bearer token needs.
"""

from __future__ import annotations

import string
from typing import Any, NamedTuple
from urllib.parse import quote

from gce_disktypes.options import ListOptions

COMPUTE_READONLY_SCOPE = "https://www.googleapis.com/auth/compute.readonly"


class Endpoint(NamedTuple):
    name: str
    method: str
    template: str
    scope: str = COMPUTE_READONLY_SCOPE

    @property
    def path_params(self) -> list[str]:
        return [
            field
            for _, field, _, _ in string.Formatter().parse(self.template)
            if field
        ]

    def path(self, **params: str) -> str:
        """Substitute path parameters into the template.

        Values are percent-encoded, including ``/`` and ``=``, so each value
        stays a single path segment.

        Raises:
            ValueError: If a parameter is missing or empty.
        """
        encoded: dict[str, str] = {}
        for field in self.path_params:
            value = params.get(field)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{self.name}: {field!r} must be a non-empty string")
            encoded[field] = quote(value, safe="")
        return self.template.format(**encoded)


GET_DISK_TYPE = Endpoint("DiskTypes:get", "GET", "/zones/{zone}/diskTypes/{diskType}")
LIST_DISK_TYPES = Endpoint("DiskTypes:list", "GET", "/zones/{zone}/diskTypes")


def build_list_params(
    marker: str | None = None,
    options: ListOptions | None = None,
) -> dict[str, Any]:
    """Query parameters for a list request at ``marker``."""
    params: dict[str, Any] = {}
    if options is not None:
        params.update(options.to_params())
    if marker is not None:
        params["pageToken"] = marker
    return params
