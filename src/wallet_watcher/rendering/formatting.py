"""Display formatting for balances and activity times.

Every formatter returns ``PLACEHOLDER`` for an unset or unrepresentable
value instead of raising, so a single bad field never breaks the page.
"""

from wallet_watcher.common.utils import from_unix_s, split_duration

PLACEHOLDER = "?"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_amount(value: float) -> str:
    """Shortest decimal form; integral amounts drop the trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_balance(balance: float | None, ticker: str) -> str:
    """``"1.5BTC"`` style balance, or the placeholder when unknown."""
    if balance is None:
        return PLACEHOLDER
    return format_amount(balance) + ticker


def format_timestamp(timestamp: int | None) -> str:
    """``YYYY-MM-DD HH:MM:SS`` in UTC."""
    if timestamp is None:
        return PLACEHOLDER
    try:
        return from_unix_s(timestamp).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        return PLACEHOLDER


def format_elapsed(total_seconds: int) -> str:
    """
    Human-readable duration.

    Starts at the largest non-zero unit and lists every smaller unit down to
    seconds, e.g. ``"1 day, 0 hours, 0 minutes, 5 seconds"``. Negative
    durations are clamped to zero.
    """
    days, hours, minutes, seconds = split_duration(max(0, total_seconds))

    if days > 0:
        parts = [(days, "day"), (hours, "hour"), (minutes, "minute"), (seconds, "second")]
    elif hours > 0:
        parts = [(hours, "hour"), (minutes, "minute"), (seconds, "second")]
    elif minutes > 0:
        parts = [(minutes, "minute"), (seconds, "second")]
    else:
        parts = [(seconds, "second")]

    return ", ".join(_plural(count, unit) for count, unit in parts)


def format_time_since(timestamp: int | None, now: int) -> str:
    """Elapsed time between ``timestamp`` and ``now``."""
    if timestamp is None:
        return PLACEHOLDER
    return format_elapsed(now - timestamp)
