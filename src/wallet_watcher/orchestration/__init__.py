from wallet_watcher.orchestration.refresh import RefreshOrchestrator, RefreshReport

__all__ = ["RefreshOrchestrator", "RefreshReport"]
