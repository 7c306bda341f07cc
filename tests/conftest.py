"""Shared test fixtures for hotaisle."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest
from loguru import logger

from hotaisle.api.client import HotAisleClient


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop log sinks bound to streams that pytest closes between tests."""
    yield
    logger.remove()


@pytest.fixture
def mock_client():
    """A HotAisleClient with mocked HTTP methods."""
    client = HotAisleClient(token="test-token")
    client.get = AsyncMock(return_value=None)
    client.post = AsyncMock(return_value=None)
    client.put = AsyncMock(return_value=None)
    client.patch = AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=None)
    return client


@pytest.fixture
def recorder():
    """A MockTransport handler that records requests and replays a response."""

    class Recorder:
        def __init__(self) -> None:
            self.requests: list[httpx.Request] = []
            self.response = httpx.Response(200, json={})

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(
                self.response.status_code,
                headers=self.response.headers,
                content=self.response.content,
            )

        @property
        def last(self) -> httpx.Request:
            return self.requests[-1]

    return Recorder()


@pytest.fixture
def make_client(recorder):
    """Build a client whose requests go to the recorder."""

    def _make(**options) -> HotAisleClient:
        options.setdefault("http_transport", httpx.MockTransport(recorder))
        return HotAisleClient(**options)

    return _make


@pytest.fixture
def sample_user_data():
    return {
        "user": {
            "name": "Ada",
            "email": "ada@example.com",
            "created": "2024-01-01T00:00:00Z",
        },
        "teams": [
            {
                "handle": "dev",
                "name": "Developers",
                "roles": ["owner"],
                "effective_roles": ["owner", "admin"],
            }
        ],
    }


@pytest.fixture
def sample_server_data():
    """Raw bare metal server details as the API returns them."""
    return {
        "name": "enc1-css10-1",
        "ip_address": "10.0.0.5",
        "manufacturer": "Dell",
        "model": "XE9680",
        "ssh_access": {"ip_address": "203.0.113.10", "port": 2222},
        "cpu_cores": 96,
        "ram_capacity": 2048,
        "disk_capacity": 30000,
        "cpus": [
            {"count": 2, "manufacturer": "Intel", "model": "Xeon 8462Y+", "cores": 48, "frequency": 2800}
        ],
        "gpus": [{"count": 8, "manufacturer": "AMD", "model": "MI300X"}],
        "disks": None,
        "os_status": {
            "os_selection": "ubuntu-22.04",
            "os_install_status": "installed",
            "last_imaging_update": "2024-03-01T12:00:00Z",
        },
    }


@pytest.fixture
def sample_vm_data():
    return {
        "name": "vm-1",
        "ip_address": "10.0.1.7",
        "cpu_cores": 13,
        "ram_capacity": 224,
        "disk_capacity": 12,
        "cpus": {"count": 1, "manufacturer": "Intel", "model": "Xeon", "cores": 13, "frequency": 2800},
        "gpus": [{"count": 1, "manufacturer": "AMD", "model": "MI300X"}],
    }
