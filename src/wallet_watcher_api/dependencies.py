from fastapi import Request

from wallet_watcher.dependency_container import WatcherContext


def get_watcher(request: Request) -> WatcherContext:
    """Watcher context created by the app lifespan."""
    return request.app.state.watcher
