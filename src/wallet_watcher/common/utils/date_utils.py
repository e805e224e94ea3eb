"""
Date Utilities
==============

Unix-second helpers used when deriving display fields from stored timestamps.
"""

import time
from datetime import UTC, datetime


def unix_now() -> int:
    """
    Get current Unix time in whole seconds.

    Returns:
        Seconds since the epoch
    """
    return int(time.time())


def from_unix_s(timestamp: int) -> datetime:
    """
    Convert Unix timestamp in seconds to datetime (UTC).

    Args:
        timestamp: Unix timestamp in seconds

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        OverflowError, OSError, ValueError: If the timestamp is outside the
            range the platform calendar supports
    """
    return datetime.fromtimestamp(timestamp, tz=UTC)


def split_duration(total_seconds: int) -> tuple[int, int, int, int]:
    """
    Split a non-negative duration into days, hours, minutes and seconds.

    Args:
        total_seconds: Duration in seconds

    Returns:
        (days, hours, minutes, seconds)
    """
    days, remainder = divmod(total_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return days, hours, minutes, seconds
