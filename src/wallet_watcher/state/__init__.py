from wallet_watcher.state.store import WalletStateStore

__all__ = ["WalletStateStore"]
