from wallet_watcher.shared.models.enums import Provider
from wallet_watcher.shared.models.wallet import (
    Address,
    AddressSnapshot,
    Coin,
    CoinSnapshot,
    ObservedActivity,
)

__all__ = [
    "Provider",
    "Address",
    "AddressSnapshot",
    "Coin",
    "CoinSnapshot",
    "ObservedActivity",
]
