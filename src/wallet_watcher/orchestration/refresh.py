"""
Refresh Orchestrator
====================

Runs refresh passes: for every configured address, ask the adapter of the
coin's provider for the address's current activity and write whatever was
observed back into the state store.

Pass policy:
    - Per-address isolation: a FetchError (or any unexpected error from an
      adapter) is logged and the address keeps its previous values; the rest
      of the pass is unaffected. No retries.
    - Bounded fan-out: at most ``max_concurrency`` requests in flight; jobs
      are started in configuration order.
    - Single flight: callers arriving while a pass runs await that same pass.
    - Refresh window: a pass completed less than ``min_interval`` seconds ago
      is reused instead of starting a new one.
    - A started pass always runs to completion, even if the request that
      triggered it is cancelled.
"""

import asyncio
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from wallet_watcher.common.factories import AdapterRegistry
from wallet_watcher.infrastructure.observability import get_orchestration_logger
from wallet_watcher.ingestion.adapters.exceptions import FetchError
from wallet_watcher.ingestion.config.value_objects import RefreshPolicy
from wallet_watcher.shared.models import Provider
from wallet_watcher.state.store import WalletStateStore

log = get_orchestration_logger()


@dataclass(frozen=True)
class _FetchJob:
    coin_index: int
    address_index: int
    provider: Provider
    ticker: str
    address: str


@dataclass(frozen=True)
class RefreshReport:
    """Outcome counts of one refresh pass."""

    attempted: int = 0
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0  # No adapter registered for the coin's provider
    reused: bool = False
    completed_at: float | None = None  # Unix time


class RefreshOrchestrator:
    """Applies provider results to the wallet state store."""

    def __init__(
        self,
        store: WalletStateStore,
        registry: AdapterRegistry,
        policy: RefreshPolicy | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.registry = registry
        self.policy = policy or RefreshPolicy()
        self._clock = clock
        self._inflight: asyncio.Task | None = None
        self._last_pass_at: float | None = None
        self.last_report: RefreshReport | None = None

    def _is_fresh(self) -> bool:
        if self._last_pass_at is None or self.last_report is None:
            return False
        return self._clock() - self._last_pass_at < self.policy.min_interval

    async def refresh(self, force: bool = False) -> RefreshReport:
        """Bring the store up to date, sharing or reusing passes when possible.

        Args:
            force: Ignore the refresh window (an in-flight pass is still shared)
        """
        if self._inflight is None:
            if not force and self._is_fresh():
                return replace(self.last_report, reused=True)
            self._inflight = asyncio.create_task(self._run_pass())
        return await asyncio.shield(self._inflight)

    async def _run_pass(self) -> RefreshReport:
        try:
            async with self.store.snapshot_for_update() as coins:
                jobs = [
                    _FetchJob(
                        coin_index=ci,
                        address_index=ai,
                        provider=coin.provider,
                        ticker=coin.ticker,
                        address=address.address,
                    )
                    for ci, coin in enumerate(coins)
                    for ai, address in enumerate(coin.addresses)
                ]

            log.info("refresh_pass_started", addresses=len(jobs))
            semaphore = asyncio.Semaphore(self.policy.max_concurrency)
            outcomes = await asyncio.gather(
                *(self._refresh_address(semaphore, job) for job in jobs)
            )

            report = RefreshReport(
                attempted=len(jobs),
                succeeded=outcomes.count("ok"),
                failed=outcomes.count("failed"),
                skipped=outcomes.count("skipped"),
                completed_at=time.time(),
            )
            self.last_report = report
            self._last_pass_at = self._clock()
            log.info(
                "refresh_pass_completed",
                attempted=report.attempted,
                succeeded=report.succeeded,
                failed=report.failed,
                skipped=report.skipped,
            )
            return report
        finally:
            self._inflight = None

    async def _refresh_address(
        self, semaphore: asyncio.Semaphore, job: _FetchJob
    ) -> str:
        adapter = self.registry.get(job.provider)
        if adapter is None:
            log.warning(
                "provider_not_registered",
                provider=job.provider.value,
                ticker=job.ticker,
                address=job.address,
            )
            return "skipped"

        async with semaphore:
            try:
                observed = await adapter.fetch(job.address, job.ticker)
            except FetchError as e:
                log.warning(
                    "address_fetch_failed",
                    provider=job.provider.value,
                    ticker=job.ticker,
                    address=job.address,
                    status_code=e.status_code,
                    error=str(e),
                )
                return "failed"
            except Exception:
                log.exception(
                    "address_refresh_crashed",
                    provider=job.provider.value,
                    ticker=job.ticker,
                    address=job.address,
                )
                return "failed"

        await self.store.apply_result(job.coin_index, job.address_index, observed)
        return "ok"
