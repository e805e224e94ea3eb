"""
Wallet domain models.

Two families live here:
    - Coin / Address: the mutable registry held by the state store.
    - CoinSnapshot / AddressSnapshot: frozen copies handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wallet_watcher.shared.models.enums import Provider


@dataclass(frozen=True)
class ObservedActivity:
    """Fields successfully parsed from one provider response.

    Each field is independently optional: ``None`` means "not observed",
    never "reset to unknown".
    """

    balance: float | None = None
    last_activity_timestamp: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.balance is None and self.last_activity_timestamp is None


@dataclass
class Address:
    """Tracked address with its last known balance and activity time."""

    address: str
    balance: float | None = None
    last_activity_timestamp: int | None = None

    def apply(self, observed: ObservedActivity) -> None:
        """Overwrite only the fields present in ``observed``."""
        if observed.balance is not None:
            self.balance = observed.balance
        if observed.last_activity_timestamp is not None:
            self.last_activity_timestamp = observed.last_activity_timestamp

    def snapshot(self) -> AddressSnapshot:
        return AddressSnapshot(
            address=self.address,
            balance=self.balance,
            last_activity_timestamp=self.last_activity_timestamp,
        )


@dataclass
class Coin:
    """Configured coin: display name, ticker, provider and its addresses."""

    name: str
    ticker: str
    provider: Provider
    addresses: list[Address] = field(default_factory=list)

    def snapshot(self) -> CoinSnapshot:
        return CoinSnapshot(
            name=self.name,
            ticker=self.ticker,
            provider=self.provider,
            addresses=tuple(address.snapshot() for address in self.addresses),
        )


@dataclass(frozen=True)
class AddressSnapshot:
    address: str
    balance: float | None
    last_activity_timestamp: int | None


@dataclass(frozen=True)
class CoinSnapshot:
    name: str
    ticker: str
    provider: Provider
    addresses: tuple[AddressSnapshot, ...]
