"""
Tests for the Chainz and Blnscan provider adapters.

Adapters are exercised through a fake IHttpClient so that URL building,
status handling and field extraction are checked without network access.
"""

import pytest
import structlog.testing

from wallet_watcher.ingestion.adapters import (
    BadStatusError,
    BlnscanAdapter,
    ChainzAdapter,
    FetchError,
    TransportError,
)
from wallet_watcher.ingestion.ports.http import HttpResponse
from wallet_watcher.shared.models import ObservedActivity, Provider

CHAINZ_URL = "https://chainz.cryptoid.info/btc/api.dws?q=addressinfo&a=addr1"
BLNSCAN_URL = "https://blnexplorer.io/api/account/addr1"


class TestChainzAdapter:
    def test_urls_use_lowercase_ticker(self, fake_http_client):
        adapter = ChainzAdapter(fake_http_client)

        assert adapter.provider == Provider.CHAINZ
        assert adapter.build_url("addr1", "BTC") == CHAINZ_URL
        assert adapter.icon_url("BTC") == "https://chainz.cryptoid.info/logo/btc.png"
        assert (
            adapter.link_url("BTC", "addr1")
            == "https://chainz.cryptoid.info/btc/address.dws?addr1.htm"
        )

    def test_custom_base_url(self, fake_http_client):
        adapter = ChainzAdapter(fake_http_client, base_url="http://mirror.local/")
        assert (
            adapter.build_url("a", "LTC")
            == "http://mirror.local/ltc/api.dws?q=addressinfo&a=a"
        )

    @pytest.mark.asyncio
    async def test_fetch_reads_balance_and_timestamp(self, fake_http_client):
        fake_http_client.responses[CHAINZ_URL] = {
            "balance": 1.5,
            "lastBlockTimestamp": 1700000000,
        }
        adapter = ChainzAdapter(fake_http_client)

        observed = await adapter.fetch("addr1", "BTC")

        assert observed == ObservedActivity(balance=1.5, last_activity_timestamp=1700000000)
        assert fake_http_client.requested == [CHAINZ_URL]

    @pytest.mark.asyncio
    async def test_missing_balance_leaves_it_unobserved(self, fake_http_client):
        fake_http_client.responses[CHAINZ_URL] = {"lastBlockTimestamp": 1700000000}
        observed = await ChainzAdapter(fake_http_client).fetch("addr1", "BTC")

        assert observed.balance is None
        assert observed.last_activity_timestamp == 1700000000

    @pytest.mark.asyncio
    async def test_response_without_fields_logs_nothing_observed(self, fake_http_client):
        fake_http_client.responses[CHAINZ_URL] = {"error": "unknown address"}

        with structlog.testing.capture_logs() as logs:
            adapter = ChainzAdapter(fake_http_client)
            observed = await adapter.fetch("addr1", "BTC")

        assert observed.is_empty
        assert [entry["event"] for entry in logs] == ["address_observed_nothing"]

    def test_integer_balance_is_accepted(self, fake_http_client):
        observed = ChainzAdapter(fake_http_client).parse({"balance": 3})
        assert observed.balance == 3.0
        assert isinstance(observed.balance, float)

    @pytest.mark.parametrize(
        "body",
        [
            {"balance": "1.5", "lastBlockTimestamp": "1700000000"},
            {"balance": True, "lastBlockTimestamp": False},
            {"balance": None, "lastBlockTimestamp": 1700000000.5},
            [],
            "not an object",
            None,
        ],
    )
    def test_mistyped_fields_are_not_observed(self, fake_http_client, body):
        assert ChainzAdapter(fake_http_client).parse(body) == ObservedActivity()

    @pytest.mark.asyncio
    async def test_non_200_status_raises_fetch_error(self, fake_http_client):
        fake_http_client.responses[CHAINZ_URL] = HttpResponse(
            status_code=503, body="maintenance", headers={}, url=CHAINZ_URL
        )

        with pytest.raises(BadStatusError) as exc_info:
            await ChainzAdapter(fake_http_client).fetch("addr1", "BTC")

        assert exc_info.value.status_code == 503
        assert exc_info.value.endpoint == CHAINZ_URL
        assert isinstance(exc_info.value, FetchError)

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, fake_http_client):
        with pytest.raises(TransportError):
            await ChainzAdapter(fake_http_client).fetch("addr1", "BTC")


class TestBlnscanAdapter:
    def test_urls(self, fake_http_client):
        adapter = BlnscanAdapter(fake_http_client)

        assert adapter.provider == Provider.BLNSCAN
        assert adapter.build_url("addr1", "BEL") == BLNSCAN_URL
        assert adapter.icon_url("BEL") == "https://blnexplorer.io/favicon.ico"
        assert adapter.link_url("BEL", "addr1") == "https://blnexplorer.io/addr1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("time_value", [1700000000, "1700000000"])
    async def test_time_as_int_or_numeric_string(self, fake_http_client, time_value):
        fake_http_client.responses[BLNSCAN_URL] = {
            "txns": [{"time": time_value}, {"time": 1600000000}]
        }

        observed = await BlnscanAdapter(fake_http_client).fetch("addr1", "BEL")

        assert observed.last_activity_timestamp == 1700000000
        assert observed.balance is None

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"txns": []},
            {"txns": "nope"},
            {"txns": ["not-a-dict"]},
            {"txns": [{}]},
            {"txns": [{"time": "yesterday"}]},
            {"txns": [{"time": 1.7e9}]},
            {"txns": [{"time": True}]},
            ["txns"],
        ],
    )
    def test_unusable_bodies_observe_nothing(self, fake_http_client, body):
        assert BlnscanAdapter(fake_http_client).parse(body) == ObservedActivity()

    def test_balance_is_never_observed(self, fake_http_client):
        observed = BlnscanAdapter(fake_http_client).parse(
            {"balance": 42, "txns": [{"time": 5}]}
        )
        assert observed == ObservedActivity(last_activity_timestamp=5)
