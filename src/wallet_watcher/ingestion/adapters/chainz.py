"""Chainz (cryptoID) explorer adapter."""

from typing import Any

from wallet_watcher.ingestion.adapters.base import BaseProviderAdapter
from wallet_watcher.shared.models import ObservedActivity, Provider


class ChainzAdapter(BaseProviderAdapter):
    """Reads ``balance`` and ``lastBlockTimestamp`` from the addressinfo API."""

    provider = Provider.CHAINZ
    default_base_url = "https://chainz.cryptoid.info"

    def build_url(self, address: str, ticker: str) -> str:
        return f"{self.base_url}/{ticker.lower()}/api.dws?q=addressinfo&a={address}"

    def parse(self, body: Any) -> ObservedActivity:
        if not isinstance(body, dict):
            return ObservedActivity()

        balance = body.get("balance")
        if isinstance(balance, bool) or not isinstance(balance, (int, float)):
            balance = None

        timestamp = body.get("lastBlockTimestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            timestamp = None

        return ObservedActivity(
            balance=float(balance) if balance is not None else None,
            last_activity_timestamp=timestamp,
        )

    def icon_url(self, ticker: str) -> str:
        return f"{self.base_url}/logo/{ticker.lower()}.png"

    def link_url(self, ticker: str, address: str) -> str:
        return f"{self.base_url}/{ticker.lower()}/address.dws?{address}.htm"
