"""Pytest configuration and shared fixtures for the mining monitor tests."""

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from netrum_monitor.helpers.constants import (
    CLAIM_PATH,
    LIVE_LOG_PATH,
    MINING_API_BASE_URL,
)
from netrum_monitor.mining.client import MiningClient


NODE_ADDRESS = "0xABCDEF0123456789ABCDEF0123456789ABCDEF01"


@pytest.fixture
def node_address() -> str:
    """A valid node address."""
    return NODE_ADDRESS


@pytest.fixture
def live_log_url() -> str:
    """Full URL of the live-log endpoint."""
    return f"{MINING_API_BASE_URL}{LIVE_LOG_PATH}"


@pytest.fixture
def claim_url() -> str:
    """Full URL of the claim endpoint."""
    return f"{MINING_API_BASE_URL}{CLAIM_PATH}"


@pytest_asyncio.fixture
async def mining_client() -> AsyncGenerator[MiningClient]:
    """Mining client pinned to the public base URL, for use with httpx_mock.

    Yields:
        MiningClient: Client backed by a fresh httpx.AsyncClient
    """
    async with httpx.AsyncClient(timeout=5.0) as http_client:
        yield MiningClient(http_client, base_url=MINING_API_BASE_URL)


@pytest.fixture
def recorded_sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the wait between claim samples with a recorder.

    Returns:
        list[float]: Delays requested, in call order
    """
    delays: list[float] = []

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)

    monkeypatch.setattr("netrum_monitor.mining.monitor.sleep", fake_sleep)
    return delays
