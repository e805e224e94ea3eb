from wallet_watcher.rendering.formatting import (
    PLACEHOLDER,
    format_balance,
    format_elapsed,
    format_time_since,
    format_timestamp,
)
from wallet_watcher.rendering.view import (
    AddressView,
    CoinView,
    WalletView,
    render_view,
)

__all__ = [
    "PLACEHOLDER",
    "format_balance",
    "format_elapsed",
    "format_time_since",
    "format_timestamp",
    "AddressView",
    "CoinView",
    "WalletView",
    "render_view",
]
