"""
Base provider adapter.

One adapter object per blockchain-explorer API carries every piece of
provider-specific behaviour:
    - fetch(): request + normalize one address into ObservedActivity
    - icon_url(): logo shown next to the coin name
    - link_url(): explorer page for an address

Subclasses only build URLs and parse a decoded JSON body. The transport,
status check and error mapping live here so every provider fails the same way.
"""

from abc import ABC, abstractmethod
from typing import Any

from wallet_watcher.infrastructure.observability import get_ingestion_logger
from wallet_watcher.ingestion.adapters.exceptions import BadStatusError
from wallet_watcher.ingestion.ports.http import IHttpClient
from wallet_watcher.shared.models import ObservedActivity, Provider


class BaseProviderAdapter(ABC):
    """
    Normalizes one explorer API into ObservedActivity.

    Attributes:
        provider: Provider enum value this adapter serves
        base_url: Explorer host, overridable for mirrors and tests
    """

    provider: Provider
    default_base_url: str

    def __init__(self, http_client: IHttpClient, base_url: str | None = None):
        self.http = http_client
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.log = get_ingestion_logger(
            f"{self.provider.value}-adapter", provider=self.provider.value
        )

    @abstractmethod
    def build_url(self, address: str, ticker: str) -> str:
        """Return the API URL queried for ``address``."""

    @abstractmethod
    def parse(self, body: Any) -> ObservedActivity:
        """Extract observed fields from a decoded JSON body.

        Must never raise: a missing or mistyped field is left unobserved.
        """

    @abstractmethod
    def icon_url(self, ticker: str) -> str:
        """Return the icon URL displayed for a coin of this provider."""

    @abstractmethod
    def link_url(self, ticker: str, address: str) -> str:
        """Return the explorer page URL for ``address``."""

    async def fetch(self, address: str, ticker: str) -> ObservedActivity:
        """Fetch and normalize the current activity of one address.

        Raises:
            FetchError: On transport failure, non-200 status or non-JSON body
        """
        url = self.build_url(address, ticker)
        response = await self.http.get(url)

        if response.status_code != 200:
            raise BadStatusError(
                f"{self.provider.value} returned HTTP {response.status_code} for {address}",
                status_code=response.status_code,
                endpoint=url,
            )

        observed = self.parse(response.body)
        if observed.is_empty:
            self.log.debug("address_observed_nothing", ticker=ticker, address=address)
        else:
            self.log.debug(
                "address_fetched",
                ticker=ticker,
                address=address,
                balance=observed.balance,
                last_activity_timestamp=observed.last_activity_timestamp,
            )
        return observed
