from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wallet_watcher import __version__
from wallet_watcher.common.factories import AdapterRegistry
from wallet_watcher.config.state import WatcherConfig
from wallet_watcher.dependency_container import WatcherContext
from wallet_watcher.infrastructure.observability import get_api_logger
from wallet_watcher.ingestion.ports.http import IHttpClient
from wallet_watcher_api.health import router as health_router
from wallet_watcher_api.routes import router as wallet_router

log = get_api_logger()


def create_app(
    config: WatcherConfig,
    http_client: IHttpClient | None = None,
    registry: AdapterRegistry | None = None,
) -> FastAPI:
    """Build the FastAPI app; the lifespan owns the watcher context."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        watcher = await WatcherContext.create(
            config, http_client=http_client, registry=registry
        )
        app.state.watcher = watcher
        log.info("watcher_started", coins=len(config.coins))
        try:
            yield
        finally:
            await watcher.close()
            log.info("watcher_stopped")

    app = FastAPI(title="Wallet Watcher", version=__version__, lifespan=lifespan)
    app.include_router(health_router, prefix="")
    app.include_router(wallet_router, prefix="")
    return app
