"""
Dependency container for the watcher.

Wires together:
- HTTP client (aiohttp wrapper)
- Adapter registry (one adapter per provider)
- Wallet state store
- Refresh orchestrator

Owned by the serving component; nothing here is module-global.
"""

from dataclasses import dataclass

from wallet_watcher.common.factories import AdapterRegistry, build_default_registry
from wallet_watcher.config.state import WatcherConfig
from wallet_watcher.ingestion.config.value_objects import HttpClientConfig, RefreshPolicy
from wallet_watcher.ingestion.connectors.aiohttp_client import AiohttpClient
from wallet_watcher.ingestion.ports.http import IHttpClient
from wallet_watcher.orchestration.refresh import RefreshOrchestrator
from wallet_watcher.rendering.view import WalletView, render_view
from wallet_watcher.state.store import WalletStateStore


@dataclass
class WatcherContext:
    """Everything a request needs to refresh and render the wallet view."""

    config: WatcherConfig
    http_client: IHttpClient
    registry: AdapterRegistry
    store: WalletStateStore
    orchestrator: RefreshOrchestrator

    @classmethod
    async def create(
        cls,
        config: WatcherConfig,
        http_client: IHttpClient | None = None,
        registry: AdapterRegistry | None = None,
    ) -> "WatcherContext":
        """
        Build the context and load the initial registry from ``config``.

        Args:
            config: Validated watcher configuration
            http_client: Override the aiohttp client (tests)
            registry: Override the default adapters (tests)
        """
        http_client = http_client or AiohttpClient(
            HttpClientConfig(timeout=config.http.timeout)
        )
        registry = registry or build_default_registry(http_client)

        store = WalletStateStore()
        await store.load_initial(config.build_coins())

        orchestrator = RefreshOrchestrator(
            store,
            registry,
            RefreshPolicy(
                min_interval=config.refresh.min_interval,
                max_concurrency=config.http.max_concurrency,
            ),
        )
        return cls(
            config=config,
            http_client=http_client,
            registry=registry,
            store=store,
            orchestrator=orchestrator,
        )

    async def refresh_and_render(self) -> WalletView:
        """Run (or join) a refresh pass, then render the current state."""
        await self.orchestrator.refresh()
        snapshot = await self.store.snapshot_for_render()
        return render_view(snapshot, self.registry)

    async def close(self) -> None:
        await self.http_client.close()
