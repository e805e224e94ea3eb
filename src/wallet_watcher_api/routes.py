from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from wallet_watcher.dependency_container import WatcherContext
from wallet_watcher.infrastructure.observability import get_api_logger
from wallet_watcher_api.dependencies import get_watcher
from wallet_watcher_api.templates import render_page

log = get_api_logger()

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def wallet_status(watcher: WatcherContext = Depends(get_watcher)) -> HTMLResponse:
    """Refresh balances and render the status page.

    Always answers 200; unknown values show as "?".
    """
    view = await watcher.refresh_and_render()
    log.debug("status_page_rendered", coins=len(view.coins))
    return HTMLResponse(content=render_page(view))


@router.get("/api/wallets")
async def wallet_status_json(
    watcher: WatcherContext = Depends(get_watcher),
) -> dict[str, Any]:
    """Same view as the status page, as JSON."""
    view = await watcher.refresh_and_render()
    return view.to_dict()
