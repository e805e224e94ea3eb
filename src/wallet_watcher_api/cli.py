"""
Command-line entry point: load configuration, configure logging, serve.

Exit codes:
    0 - server stopped normally
    1 - configuration unreadable or invalid
"""

import argparse

import uvicorn

from wallet_watcher.config.state import ConfigLoader, ConfigurationError
from wallet_watcher.infrastructure.observability import (
    get_infrastructure_logger,
    setup_logging,
)
from wallet_watcher_api.main import create_app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallet-watcher",
        description="Serve balances and last activity of configured crypto addresses.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the YAML config (default: $WALLET_WATCHER_CONFIG or config/coins.yaml)",
    )
    parser.add_argument("--host", default=None, help="Override server.host")
    parser.add_argument("--port", type=int, default=None, help="Override server.port")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader(args.config).load()
    except ConfigurationError as e:
        setup_logging(level="INFO", json_logs=False)
        get_infrastructure_logger("config-loader").error(
            "configuration_invalid", path=e.path, error=str(e)
        )
        return 1

    setup_logging(level=config.logging.level, json_logs=config.logging.json_logs)

    host = args.host or config.server.host
    port = args.port or config.server.port
    get_infrastructure_logger("cli").info("server_starting", host=host, port=port)

    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
    return 0
