from wallet_watcher.common.factories.adapter_factory import (
    AdapterRegistry,
    build_default_registry,
)

__all__ = ["AdapterRegistry", "build_default_registry"]
