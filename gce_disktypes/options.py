"""Options accepted by list operations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Nominal page size for list calls that send no ``maxResults``. The client
# never sends this value; the service applies its own default, which may differ.
DEFAULT_MAX_RESULTS = 100


class ListOptions(BaseModel):
    """Listing configuration, rendered as query parameters.

    Usage::

        ListOptions(max_results=10, filter="name eq pd-.*")
    """

    max_results: int | None = Field(default=None, ge=1, le=500)
    filter: str | None = None

    @property
    def effective_max_results(self) -> int:
        """Requested page size, or the nominal default when unset."""
        if self.max_results is None:
            return DEFAULT_MAX_RESULTS
        return self.max_results

    def to_params(self) -> dict[str, Any]:
        """Render the options as query parameters, omitting unset values."""
        params: dict[str, Any] = {}
        if self.max_results is not None:
            params["maxResults"] = self.max_results
        if self.filter is not None:
            params["filter"] = self.filter
        return params
