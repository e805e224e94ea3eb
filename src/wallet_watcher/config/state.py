"""
Configuration state for wallet-watcher.

A single YAML document describes the watched coins plus server, HTTP,
refresh and logging settings. It is validated with pydantic, then environment
overrides are applied on top. Loading either yields a complete
``WatcherConfig`` or raises ``ConfigurationError``; there is no partial start.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from wallet_watcher.shared.models import Address, Coin, Provider

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/coins.yaml"


class ConfigurationError(Exception):
    """Configuration file is unreadable or fails schema validation."""

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class AddressConfig(BaseModel):
    """One watched address."""

    address: str = Field(min_length=1)

    @field_validator("address")
    @classmethod
    def strip_address(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("address must not be blank")
        return v

    class Config:
        extra = "forbid"


class CoinConfig(BaseModel):
    """Coin section: display name, ticker, provider and addresses."""

    name: str = Field(min_length=1)
    ticker: str = Field(min_length=1)
    api: Provider
    addresses: list[AddressConfig] = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def accept_single_address(cls, data: Any) -> Any:
        """Accept the legacy ``address: "..."`` form used by older config files."""
        if isinstance(data, dict) and "address" in data:
            if "addresses" in data:
                raise ValueError("use either 'address' or 'addresses', not both")
            data = dict(data)
            data["addresses"] = [{"address": data.pop("address")}]
        return data

    @field_validator("api", mode="before")
    @classmethod
    def normalize_api(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("ticker")
    @classmethod
    def strip_ticker(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ticker must not be blank")
        return v

    class Config:
        extra = "forbid"


class ServerConfig(BaseModel):
    """Bind address of the HTTP view."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)

    class Config:
        extra = "forbid"


class HttpConfig(BaseModel):
    """Outbound provider request settings."""

    timeout: float = Field(default=10.0, gt=0)
    max_concurrency: int = Field(default=8, ge=1, le=256)

    class Config:
        extra = "forbid"


class RefreshConfig(BaseModel):
    """Refresh window: a pass younger than ``min_interval`` seconds is reused."""

    min_interval: float = Field(default=30.0, ge=0)

    class Config:
        extra = "forbid"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return v

    class Config:
        extra = "forbid"


class WatcherConfig(BaseModel):
    """Root configuration - single source of truth for the watcher."""

    coins: list[CoinConfig] = Field(min_length=1)
    server: ServerConfig = Field(default_factory=ServerConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        extra = "forbid"

    def build_coins(self) -> list[Coin]:
        """Build the initial wallet registry, preserving configuration order."""
        return [
            Coin(
                name=coin.name,
                ticker=coin.ticker,
                provider=coin.api,
                addresses=[Address(address=entry.address) for entry in coin.addresses],
            )
            for coin in self.coins
        ]


# =============================================================================
# CONFIG LOADER - Clean, Validated Loading
# =============================================================================


class ConfigLoader:
    """
    Load and validate the watcher configuration.

    Merges:
      1. Defaults declared on the pydantic models
      2. The YAML file at ``config_path``
      3. Environment variable overrides
    """

    def __init__(self, config_path: str | Path | None = None):
        self.config_path = Path(
            config_path or os.getenv("WALLET_WATCHER_CONFIG", DEFAULT_CONFIG_PATH)
        )

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Error reading the config file {path}: {e}", path=path
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Error parsing YAML in {path}: {e}", path=path
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping at the top level",
                path=path,
            )
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if host := os.getenv("WALLET_WATCHER_HOST"):
            config.setdefault("server", {})["host"] = host

        if port := os.getenv("WALLET_WATCHER_PORT"):
            config.setdefault("server", {})["port"] = port

        if timeout := os.getenv("WALLET_WATCHER_HTTP_TIMEOUT"):
            config.setdefault("http", {})["timeout"] = timeout

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        return config

    def load(self) -> WatcherConfig:
        """
        Load complete configuration state.

        Returns:
            WatcherConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is unreadable or invalid
        """
        logger.info(f"Loading configuration from {self.config_path}")

        config = self._load_yaml(self.config_path)
        config = self._apply_env_overrides(config)

        try:
            state = WatcherConfig(**config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed for {self.config_path}: {e}",
                path=self.config_path,
            ) from e

        logger.info(
            f"Configuration loaded: coins={len(state.coins)} "
            f"addresses={sum(len(c.addresses) for c in state.coins)}"
        )
        return state


def load_config(config_path: str | Path | None = None) -> WatcherConfig:
    """Convenience wrapper around ``ConfigLoader(config_path).load()``."""
    return ConfigLoader(config_path).load()
