"""Configuration value objects for dependency injection.

Instead of injecting the whole ``WatcherConfig`` into each component, the
composition root hands each one only the settings it needs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuration for HTTP client."""

    timeout: float = 10.0
    user_agent: str = "wallet-watcher/0.1"


@dataclass(frozen=True)
class RefreshPolicy:
    """Configuration for refresh passes."""

    min_interval: float = 30.0  # Seconds a completed pass is reused for
    max_concurrency: int = 8  # Provider requests in flight per pass
