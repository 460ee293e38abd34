"""Payload builders and constants shared by the disk-types tests."""

from __future__ import annotations

from typing import Any

BASE_URL = "https://compute.test/compute/v1"
PROJECT = "test-project"
PROJECT_URL = f"{BASE_URL}/projects/{PROJECT}"
ZONE = "us-central1-a"
LIST_URL = f"{PROJECT_URL}/zones/{ZONE}/diskTypes"


def disk_type_json(name: str, zone: str = ZONE) -> dict[str, Any]:
    """Build a ``compute#diskType`` payload the way the API returns it."""
    zone_url = f"{PROJECT_URL}/zones/{zone}"
    return {
        "kind": "compute#diskType",
        "id": str(abs(hash(name)) % 10**12),
        "creationTimestamp": "2014-06-02T20:52:19.096-07:00",
        "name": name,
        "description": f"{name} description",
        "validDiskSize": "10GB-10240GB",
        "zone": zone_url,
        "selfLink": f"{zone_url}/diskTypes/{name}",
        "defaultDiskSizeGb": "100",
    }


def list_json(names: list[str], next_page_token: str | None = None) -> dict[str, Any]:
    """Build a ``compute#diskTypeList`` payload."""
    body: dict[str, Any] = {
        "kind": "compute#diskTypeList",
        "selfLink": LIST_URL,
        "items": [disk_type_json(n) for n in names],
    }
    if next_page_token is not None:
        body["nextPageToken"] = next_page_token
    return body


def not_found_json(message: str = "The resource was not found") -> dict[str, Any]:
    return {
        "error": {
            "code": 404,
            "message": message,
            "errors": [{"domain": "global", "reason": "notFound", "message": message}],
        }
    }
