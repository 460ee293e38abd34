"""Shared fixtures for the disk-types tests."""

from __future__ import annotations

import pytest

from gce_disktypes import ComputeAsyncClient, ComputeClient
from helpers import BASE_URL, PROJECT


@pytest.fixture()
def client() -> ComputeClient:
    """Create a sync ComputeClient pointed at the test base URL."""
    return ComputeClient(PROJECT, token="test-token-123", base_url=BASE_URL)


@pytest.fixture()
def async_client() -> ComputeAsyncClient:
    """Create an async ComputeAsyncClient pointed at the test base URL."""
    return ComputeAsyncClient(PROJECT, token="test-token-123", base_url=BASE_URL)
