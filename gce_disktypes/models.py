"""Resource models parsed from Compute Engine responses."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, Iterator, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class _Resource(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Deprecated(_Resource):
    """Deprecation status of a resource."""

    state: str | None = Field(default=None, description="DEPRECATED, OBSOLETE, DELETED or ACTIVE")
    replacement: str | None = None
    deprecated: str | None = None
    obsolete: str | None = None
    deleted: str | None = None


class DiskType(_Resource):
    """A class of persistent disk offered in a zone (e.g. ``pd-ssd``)."""

    kind: str = "compute#diskType"
    id: str | None = None
    creation_timestamp: datetime | None = Field(default=None, alias="creationTimestamp")
    name: str
    description: str | None = None
    valid_disk_size: str | None = Field(default=None, alias="validDiskSize")
    zone: str | None = None
    self_link: str | None = Field(default=None, alias="selfLink")
    default_disk_size_gb: int | None = Field(default=None, alias="defaultDiskSizeGb")
    deprecated: Deprecated | None = None

    @property
    def zone_name(self) -> str | None:
        """Short zone name, e.g. ``us-central1-a`` from the zone URL."""
        if not self.zone:
            return None
        return self.zone.rstrip("/").rsplit("/", 1)[-1]


class ListPage(_Resource, Generic[T]):
    """One page of a list response plus its continuation marker."""

    kind: str | None = None
    id: str | None = None
    self_link: str | None = Field(default=None, alias="selfLink")
    items: list[T] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")

    @classmethod
    def empty(cls) -> ListPage[T]:
        """Page returned when the listed collection does not exist."""
        return cls()

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
