"""Blnscan explorer adapter.

The account API lists transactions newest first; the account's last activity
is the ``time`` of the first entry. No balance is exposed.
"""

from typing import Any

from wallet_watcher.ingestion.adapters.base import BaseProviderAdapter
from wallet_watcher.shared.models import ObservedActivity, Provider


def _parse_time(value: Any) -> int | None:
    # Integer or numeric string
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


class BlnscanAdapter(BaseProviderAdapter):
    provider = Provider.BLNSCAN
    default_base_url = "https://blnexplorer.io"

    def build_url(self, address: str, ticker: str) -> str:
        return f"{self.base_url}/api/account/{address}"

    def parse(self, body: Any) -> ObservedActivity:
        if not isinstance(body, dict):
            return ObservedActivity()

        txns = body.get("txns")
        if not isinstance(txns, list) or not txns:
            return ObservedActivity()

        latest = txns[0]
        if not isinstance(latest, dict):
            return ObservedActivity()

        return ObservedActivity(last_activity_timestamp=_parse_time(latest.get("time")))

    def icon_url(self, ticker: str) -> str:
        return f"{self.base_url}/favicon.ico"

    def link_url(self, ticker: str, address: str) -> str:
        return f"{self.base_url}/{address}"
