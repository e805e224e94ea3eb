from wallet_watcher.ingestion.adapters.base import BaseProviderAdapter
from wallet_watcher.ingestion.adapters.blnscan import BlnscanAdapter
from wallet_watcher.ingestion.adapters.chainz import ChainzAdapter
from wallet_watcher.ingestion.adapters.exceptions import (
    BadStatusError,
    FetchError,
    MalformedBodyError,
    TransportError,
)

__all__ = [
    "BaseProviderAdapter",
    "BlnscanAdapter",
    "ChainzAdapter",
    "BadStatusError",
    "FetchError",
    "MalformedBodyError",
    "TransportError",
]
