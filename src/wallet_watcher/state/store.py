"""
Wallet state store.

Single source of truth for the watched coins and the last known balance and
activity time of each address. Every read and write goes through one
asyncio.Lock, so a render never sees an address whose balance was updated
while its timestamp still holds the previous value.
"""

import asyncio
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

from wallet_watcher.infrastructure.observability import get_state_logger
from wallet_watcher.shared.models import Coin, CoinSnapshot, ObservedActivity

log = get_state_logger()


class WalletStateStore:
    """Holds the mutable Coin/Address registry.

    Membership is fixed after ``load_initial``; only balances and activity
    timestamps change afterwards, and only through ``apply_result``.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._coins: list[Coin] = []

    async def load_initial(self, coins: Iterable[Coin]) -> None:
        """Replace the whole registry. Called once at startup."""
        async with self._lock:
            self._coins = list(coins)
            log.info(
                "registry_loaded",
                coins=len(self._coins),
                addresses=sum(len(c.addresses) for c in self._coins),
            )

    @asynccontextmanager
    async def snapshot_for_update(self) -> AsyncIterator[list[Coin]]:
        """Hold the lock and yield the live registry.

        Callers must not await network I/O inside the block.
        """
        async with self._lock:
            yield self._coins

    async def apply_result(
        self, coin_index: int, address_index: int, observed: ObservedActivity
    ) -> None:
        """Overwrite only the fields present in ``observed``.

        Both fields of the address are written under one lock acquisition.
        """
        async with self._lock:
            address = self._coins[coin_index].addresses[address_index]
            address.apply(observed)

    async def snapshot_for_render(self) -> tuple[CoinSnapshot, ...]:
        """Immutable, internally consistent copy of the full registry."""
        async with self._lock:
            return tuple(coin.snapshot() for coin in self._coins)
