from wallet_watcher.common.utils.date_utils import from_unix_s, split_duration, unix_now

__all__ = ["from_unix_s", "split_duration", "unix_now"]
