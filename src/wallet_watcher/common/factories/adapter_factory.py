"""
Adapter Registry
================

Maps each Provider to the adapter instance serving it. A provider without a
registered adapter is a supported state: lookups return None, the renderer
shows empty icon/link strings and the orchestrator skips its addresses.
"""

from __future__ import annotations

from collections.abc import Callable

from wallet_watcher.ingestion.adapters import (
    BaseProviderAdapter,
    BlnscanAdapter,
    ChainzAdapter,
)
from wallet_watcher.ingestion.ports.http import IHttpClient
from wallet_watcher.shared.models import Provider

AdapterBuilder = Callable[[IHttpClient], BaseProviderAdapter]

DEFAULT_BUILDERS: dict[Provider, AdapterBuilder] = {
    Provider.CHAINZ: ChainzAdapter,
    Provider.BLNSCAN: BlnscanAdapter,
}


class AdapterRegistry:
    """Registry-driven lookup of provider adapters."""

    def __init__(self) -> None:
        self._registry: dict[Provider, BaseProviderAdapter] = {}

    def register(self, adapter: BaseProviderAdapter) -> None:
        self._registry[adapter.provider] = adapter

    def get(self, provider: Provider) -> BaseProviderAdapter | None:
        return self._registry.get(provider)

    def icon_url(self, provider: Provider, ticker: str) -> str:
        adapter = self.get(provider)
        return adapter.icon_url(ticker) if adapter else ""

    def link_url(self, provider: Provider, ticker: str, address: str) -> str:
        adapter = self.get(provider)
        return adapter.link_url(ticker, address) if adapter else ""

    def available_providers(self) -> list[Provider]:
        return list(self._registry.keys())


def build_default_registry(http_client: IHttpClient) -> AdapterRegistry:
    """Register one adapter per built-in provider, sharing ``http_client``."""
    registry = AdapterRegistry()
    for builder in DEFAULT_BUILDERS.values():
        registry.register(builder(http_client))
    return registry
