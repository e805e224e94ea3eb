from wallet_watcher.ingestion.config.value_objects import HttpClientConfig, RefreshPolicy

__all__ = ["HttpClientConfig", "RefreshPolicy"]
