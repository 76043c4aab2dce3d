"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, Generator

import pytest
import respx

from vpsie._http import HttpClient
from vpsie.auth import APIKeyAuth
from vpsie.client import VpsieClient

BASE_URL = "https://api.example.com/apps/v2"


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key-12345"


@pytest.fixture
def base_url() -> str:
    """Test API base URL."""
    return BASE_URL


@pytest.fixture
def http(api_key: str) -> Generator[HttpClient, None, None]:
    """HttpClient without retries, authenticated with the test key."""
    client = HttpClient(base_url=BASE_URL, auth=APIKeyAuth(api_key=api_key), max_retries=0)
    yield client
    client.close()


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter, None, None]:
    """Mock API router."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(api_key: str, base_url: str) -> Generator[VpsieClient, None, None]:
    """Create a test VpsieClient."""
    c = VpsieClient(api_key=api_key, base_url=base_url, max_retries=0)
    yield c
    c.close()


# Sample response data
@pytest.fixture
def sample_node() -> dict[str, Any]:
    """Sample cluster node."""
    return {
        "id": 11,
        "user_id": 7,
        "hostname": "k8s-prod-worker-1",
        "default_ip": "203.0.113.10",
        "private_ip": "10.0.0.10",
        "node_type": 2,
        "node_id": 901,
        "datacenter_id": 3,
        "created_on": "2024-01-01 10:00:00",
    }


@pytest.fixture
def sample_cluster(sample_node: dict[str, Any]) -> dict[str, Any]:
    """Sample single-cluster payload."""
    return {
        "cluster_name": "k8s-prod",
        "identifier": "c0ffee00-1111-2222-3333-444455556666",
        "count": 2,
        "nodes": [sample_node],
        "created_on": "2024-01-01 10:00:00",
        "updated_on": "2024-01-02 10:00:00",
        "created_by": "ops@example.com",
        "nickname": "prod",
        "cpu": 4,
        "ram": 8192,
        "traffic": 2000,
        "color": "#336699",
        "price": 48.5,
    }


@pytest.fixture
def sample_cluster_summary() -> dict[str, Any]:
    """Sample cluster listing entry."""
    return {
        "cluster_name": "k8s-prod",
        "identifier": "c0ffee00-1111-2222-3333-444455556666",
        "count": 4,
        "created_on": "2024-01-01 10:00:00",
        "updated_on": "2024-01-02 10:00:00",
        "created_by": "ops@example.com",
        "nickname": "prod",
        "cpu": 8,
        "ram": 16384,
        "traffic": 4000,
        "color": "#336699",
        "price": 96.0,
        "managerCount": 1,
        "slaveCount": 3,
    }


@pytest.fixture
def sample_snapshot() -> dict[str, Any]:
    """Sample snapshot payload."""
    return {
        "hostname": "web-1",
        "name": "before-upgrade",
        "identifier": "snap-0001",
        "backupKey": "bk-abc",
        "state": "completed",
        "dcIdentifier": "dc-ams-1",
        "daily": 0,
        "is_snapshot": 1,
        "vmIdentifier": "vm-0001",
        "backupsha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709",
        "os_identifier": "ubuntu-22.04",
        "user_id": 7,
    }
