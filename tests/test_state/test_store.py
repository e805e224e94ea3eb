"""
Tests for WalletStateStore: partial updates, snapshots and lock discipline.
"""

import asyncio

import pytest

from wallet_watcher.shared.models import Address, Coin, ObservedActivity, Provider
from wallet_watcher.state.store import WalletStateStore


async def loaded_store(coins) -> WalletStateStore:
    store = WalletStateStore()
    await store.load_initial(coins)
    return store


class TestWalletStateStore:
    @pytest.mark.asyncio
    async def test_initial_snapshot_has_unset_fields(self, sample_coins):
        store = await loaded_store(sample_coins)
        snapshot = await store.snapshot_for_render()

        assert [coin.name for coin in snapshot] == ["Bitcoin", "Bellscoin"]
        assert [a.address for a in snapshot[0].addresses] == ["btc-addr-1", "btc-addr-2"]
        for coin in snapshot:
            for address in coin.addresses:
                assert address.balance is None
                assert address.last_activity_timestamp is None

    @pytest.mark.asyncio
    async def test_apply_result_sets_both_fields(self, sample_coins):
        store = await loaded_store(sample_coins)
        await store.apply_result(0, 1, ObservedActivity(1.5, 1700000000))

        snapshot = await store.snapshot_for_render()
        updated = snapshot[0].addresses[1]
        assert updated.balance == 1.5
        assert updated.last_activity_timestamp == 1700000000
        # Sibling address untouched
        assert snapshot[0].addresses[0].balance is None

    @pytest.mark.asyncio
    async def test_absent_fields_are_not_overwritten(self, sample_coins):
        store = await loaded_store(sample_coins)
        await store.apply_result(0, 0, ObservedActivity(2.0, 100))
        await store.apply_result(0, 0, ObservedActivity(last_activity_timestamp=200))
        await store.apply_result(0, 0, ObservedActivity())

        address = (await store.snapshot_for_render())[0].addresses[0]
        assert address.balance == 2.0
        assert address.last_activity_timestamp == 200

    @pytest.mark.asyncio
    async def test_render_snapshot_is_detached_from_live_state(self, sample_coins):
        store = await loaded_store(sample_coins)
        before = await store.snapshot_for_render()
        await store.apply_result(1, 0, ObservedActivity(last_activity_timestamp=5))

        assert before[1].addresses[0].last_activity_timestamp is None
        after = await store.snapshot_for_render()
        assert after[1].addresses[0].last_activity_timestamp == 5

    @pytest.mark.asyncio
    async def test_snapshot_for_update_holds_the_lock(self, sample_coins):
        store = await loaded_store(sample_coins)
        events: list[str] = []

        async def reader():
            await store.snapshot_for_render()
            events.append("render")

        async with store.snapshot_for_update() as coins:
            task = asyncio.create_task(reader())
            await asyncio.sleep(0)
            await asyncio.sleep(0)
            assert events == []
            coins[0].addresses[0].apply(ObservedActivity(9.0, 9))
            events.append("update")

        await task
        assert events == ["update", "render"]
        snapshot = await store.snapshot_for_render()
        assert snapshot[0].addresses[0].balance == 9.0

    @pytest.mark.asyncio
    async def test_load_initial_replaces_registry(self, sample_coins):
        store = await loaded_store(sample_coins)
        await store.load_initial(
            [Coin("Dogecoin", "DOGE", Provider.CHAINZ, [Address("doge-1")])]
        )

        snapshot = await store.snapshot_for_render()
        assert len(snapshot) == 1
        assert snapshot[0].ticker == "DOGE"
