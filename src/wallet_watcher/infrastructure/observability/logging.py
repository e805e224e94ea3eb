"""
Structured logging for wallet-watcher.

Every entry carries ``app``, ``layer`` and ``component`` so a refresh pass
can be followed across adapters, the state store and the API, e.g.::

    {"app": "wallet-watcher", "layer": "ingestion", "component": "chainz-adapter",
     "provider": "chainz", "event": "address_fetched", "ticker": "DOGE", ...}

Layers: infrastructure (config, HTTP transport), ingestion (provider
adapters), state (wallet store), orchestration (refresh passes), rendering,
api.
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

Layer = Literal[
    "infrastructure", "ingestion", "state", "orchestration", "rendering", "api"
]

_SEVERITY = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "critical": "CRITICAL",
}


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["app"] = "wallet-watcher"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mirror ``level`` into an upper-case ``severity`` field."""
    level = event_dict.get("level")
    if level:
        event_dict["severity"] = _SEVERITY.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Route structlog through stdlib logging on stdout.

    Args:
        level: Root level name; unknown names fall back to INFO
        json_logs: JSON lines when True, colored console output otherwise
        include_timestamp: Prepend an ISO ``timestamp`` field
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
    # basicConfig is a no-op once handlers exist (uvicorn, pytest)
    logging.root.setLevel(log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger bound to ``layer``, ``component`` and ``module``.

    Extra keyword arguments are bound as-is (ticker, provider, path, ...).
    """
    context: dict[str, Any] = {}
    if layer:
        context["layer"] = layer
    if component:
        context["component"] = component
    if name:
        context["module"] = name
    context.update(initial_context)

    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


def get_infrastructure_logger(
    component: str, **context: Any
) -> structlog.stdlib.BoundLogger:
    return get_logger("infrastructure", layer="infrastructure", component=component, **context)


def get_ingestion_logger(
    component: str,
    provider: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Logger for a provider adapter; ``provider`` is bound only when given."""
    if provider:
        context["provider"] = provider
    return get_logger("ingestion", layer="ingestion", component=component, **context)


def get_state_logger(
    component: str = "wallet-state-store", **context: Any
) -> structlog.stdlib.BoundLogger:
    return get_logger("state", layer="state", component=component, **context)


def get_orchestration_logger(
    component: str = "refresh-orchestrator", **context: Any
) -> structlog.stdlib.BoundLogger:
    return get_logger("orchestration", layer="orchestration", component=component, **context)


def get_api_logger(
    component: str = "fastapi", **context: Any
) -> structlog.stdlib.BoundLogger:
    return get_logger("api", layer="api", component=component, **context)
