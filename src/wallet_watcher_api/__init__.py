"""HTTP surface for wallet-watcher."""
