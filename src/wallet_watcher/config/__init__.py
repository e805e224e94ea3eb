from wallet_watcher.config.state import (
    DEFAULT_CONFIG_PATH,
    AddressConfig,
    CoinConfig,
    ConfigLoader,
    ConfigurationError,
    HttpConfig,
    LoggingConfig,
    RefreshConfig,
    ServerConfig,
    WatcherConfig,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AddressConfig",
    "CoinConfig",
    "ConfigLoader",
    "ConfigurationError",
    "HttpConfig",
    "LoggingConfig",
    "RefreshConfig",
    "ServerConfig",
    "WatcherConfig",
    "load_config",
]
