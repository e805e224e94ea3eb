"""Wallet balance and activity watcher."""

__version__ = "0.1.0"
