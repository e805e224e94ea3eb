from typing import Any

from fastapi import APIRouter, Depends

from wallet_watcher import __version__
from wallet_watcher.dependency_container import WatcherContext
from wallet_watcher_api.dependencies import get_watcher

router = APIRouter()


@router.get("/health")
async def health_check(watcher: WatcherContext = Depends(get_watcher)) -> dict[str, Any]:
    """Liveness plus what is being tracked and when it was last refreshed."""
    report = watcher.orchestrator.last_report
    return {
        "status": "healthy",
        "coins": len(watcher.config.coins),
        "addresses": sum(len(coin.addresses) for coin in watcher.config.coins),
        "providers": [p.value for p in watcher.registry.available_providers()],
        "last_refresh": report.completed_at if report else None,
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check() -> dict[str, Any]:
    """Readiness check for Kubernetes."""
    return {"status": "ready"}
