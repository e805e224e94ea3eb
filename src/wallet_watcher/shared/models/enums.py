"""
Shared enumerations for wallet-watcher.
"""

import enum


class Provider(str, enum.Enum):
    """Blockchain-explorer API a coin's addresses are polled from.

    Values match the ``api`` key of a coin in the configuration file.
    """

    CHAINZ = "chainz"
    BLNSCAN = "blnscan"
