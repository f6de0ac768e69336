from .adapter_registry import (
    ReactiveAdapterRegistry,
    default_adapters,
    get_shared_registry,
)

__all__ = ["ReactiveAdapterRegistry", "default_adapters", "get_shared_registry"]
