from wallet_watcher.ingestion.connectors.aiohttp_client import AiohttpClient

__all__ = ["AiohttpClient"]
