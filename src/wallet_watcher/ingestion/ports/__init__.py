from wallet_watcher.ingestion.ports.http import HttpResponse, IHttpClient

__all__ = ["HttpResponse", "IHttpClient"]
