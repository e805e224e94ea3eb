"""
Shared fixtures for the wallet-watcher test suite.

Provider traffic is faked at the IHttpClient port (FakeHttpClient) or at the
adapter level (FakeAdapter); no test talks to a real explorer.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src on path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from wallet_watcher.common.factories import AdapterRegistry  # noqa: E402
from wallet_watcher.ingestion.adapters.exceptions import (  # noqa: E402
    FetchError,
    TransportError,
)
from wallet_watcher.ingestion.ports.http import HttpResponse  # noqa: E402
from wallet_watcher.shared.models import (  # noqa: E402
    Address,
    Coin,
    ObservedActivity,
    Provider,
)

logger = logging.getLogger(__name__)


class FakeHttpClient:
    """IHttpClient returning canned responses keyed by URL."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses: dict[str, Any] = responses or {}
        self.requested: list[str] = []
        self.closed = False

    async def get(self, url, params=None, headers=None, timeout=None) -> HttpResponse:
        self.requested.append(url)
        outcome = self.responses.get(url)
        if outcome is None:
            raise TransportError(f"no route to {url}", endpoint=url)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, HttpResponse):
            return outcome
        return HttpResponse(status_code=200, body=outcome, headers={}, url=url)

    async def close(self) -> None:
        self.closed = True


class FakeAdapter:
    """Adapter stand-in returning scripted results per address."""

    def __init__(
        self,
        provider: Provider = Provider.CHAINZ,
        results: dict[str, ObservedActivity | Exception] | None = None,
    ):
        self.provider = provider
        self.results = results or {}
        self.calls: list[tuple[str, str]] = []

    async def fetch(self, address: str, ticker: str) -> ObservedActivity:
        self.calls.append((address, ticker))
        outcome = self.results.get(address, FetchError(f"no result for {address}"))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def icon_url(self, ticker: str) -> str:
        return f"https://icons.test/{ticker.lower()}.png"

    def link_url(self, ticker: str, address: str) -> str:
        return f"https://explorer.test/{ticker.lower()}/{address}"


@pytest.fixture
def fake_http_client():
    return FakeHttpClient()


@pytest.fixture
def make_fake_adapter():
    return FakeAdapter


@pytest.fixture
def make_registry():
    def _make(*adapters) -> AdapterRegistry:
        registry = AdapterRegistry()
        for adapter in adapters:
            registry.register(adapter)
        return registry

    return _make


@pytest.fixture
def sample_coins() -> list[Coin]:
    """Two coins; the first tracks two addresses."""
    return [
        Coin(
            name="Bitcoin",
            ticker="BTC",
            provider=Provider.CHAINZ,
            addresses=[Address(address="btc-addr-1"), Address(address="btc-addr-2")],
        ),
        Coin(
            name="Bellscoin",
            ticker="BEL",
            provider=Provider.BLNSCAN,
            addresses=[Address(address="bel-addr-1")],
        ),
    ]


@pytest.fixture
def minimal_config_dict() -> dict[str, Any]:
    return {
        "refresh": {"min_interval": 0},
        "coins": [
            {
                "name": "Bitcoin",
                "ticker": "BTC",
                "api": "chainz",
                "addresses": [{"address": "btc-addr-1"}, {"address": "btc-addr-2"}],
            },
            {
                "name": "Bellscoin",
                "ticker": "BEL",
                "api": "blnscan",
                "addresses": [{"address": "bel-addr-1"}],
            },
        ],
    }
