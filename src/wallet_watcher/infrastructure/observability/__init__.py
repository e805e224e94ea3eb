"""
Observability for wallet-watcher: structured logging with architectural
context bound to every entry, so a failed provider call can be traced back
to its coin, address and refresh pass.
"""

from .logging import (
    get_api_logger,
    # Layer-specific logger factories
    get_infrastructure_logger,
    get_ingestion_logger,
    # Base logger factory
    get_logger,
    get_orchestration_logger,
    get_state_logger,
    # Setup
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_infrastructure_logger",
    "get_ingestion_logger",
    "get_state_logger",
    "get_orchestration_logger",
    "get_api_logger",
]
