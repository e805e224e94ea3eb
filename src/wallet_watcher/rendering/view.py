"""
View rendering.

Turns a state-store snapshot into the read model served by the HTTP layer.
Rendering is pure: the same snapshot, registry and ``now`` always produce
the same view.
"""

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from wallet_watcher.common.factories import AdapterRegistry
from wallet_watcher.common.utils import unix_now
from wallet_watcher.rendering.formatting import (
    format_balance,
    format_time_since,
    format_timestamp,
)
from wallet_watcher.shared.models import CoinSnapshot


@dataclass(frozen=True)
class AddressView:
    address: str
    link_url: str
    balance: str
    last_active: str
    time_since_last_activity: str


@dataclass(frozen=True)
class CoinView:
    name: str
    ticker: str
    icon_url: str
    addresses: tuple[AddressView, ...]


@dataclass(frozen=True)
class WalletView:
    coins: tuple[CoinView, ...]
    rendered_at: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def render_coin(coin: CoinSnapshot, registry: AdapterRegistry, now: int) -> CoinView:
    return CoinView(
        name=coin.name,
        ticker=coin.ticker,
        icon_url=registry.icon_url(coin.provider, coin.ticker),
        addresses=tuple(
            AddressView(
                address=entry.address,
                link_url=registry.link_url(coin.provider, coin.ticker, entry.address),
                balance=format_balance(entry.balance, coin.ticker),
                last_active=format_timestamp(entry.last_activity_timestamp),
                time_since_last_activity=format_time_since(
                    entry.last_activity_timestamp, now
                ),
            )
            for entry in coin.addresses
        ),
    )


def render_view(
    snapshot: Iterable[CoinSnapshot],
    registry: AdapterRegistry,
    now: int | None = None,
) -> WalletView:
    """
    Derive display fields for every coin and address.

    Args:
        snapshot: Result of ``WalletStateStore.snapshot_for_render()``
        registry: Adapters supplying icon and explorer link URLs
        now: Unix seconds used for elapsed times (defaults to current time)
    """
    now = unix_now() if now is None else now
    return WalletView(
        coins=tuple(render_coin(coin, registry, now) for coin in snapshot),
        rendered_at=now,
    )
