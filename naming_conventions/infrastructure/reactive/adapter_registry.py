"""Registry of async wrapper types.

The registry answers whether a declared type wraps a single value or a
stream of values, and which type argument carries that value. Registration
replaces the internal snapshot, so lookups never observe a partial update.
"""

from __future__ import annotations

import asyncio
from collections.abc import (
    AsyncGenerator,
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Coroutine,
    Iterable,
)
import concurrent.futures
from functools import lru_cache
import threading
from typing import override

from ...application.ports.services import ReactiveAdapterRegistryPort
from ...domain.entities.type_descriptor import ReactiveAdapter


def default_adapters() -> tuple[ReactiveAdapter, ...]:
    return (
        ReactiveAdapter(asyncio.Task),
        ReactiveAdapter(asyncio.Future),
        ReactiveAdapter(concurrent.futures.Future),
        ReactiveAdapter(Coroutine, value_index=2),
        ReactiveAdapter(AsyncGenerator),
        ReactiveAdapter(AsyncIterator),
        ReactiveAdapter(AsyncIterable),
        ReactiveAdapter(Awaitable),
        ReactiveAdapter(asyncio.Event, no_value=True),
    )


class ReactiveAdapterRegistry(ReactiveAdapterRegistryPort):
    pass

    def __init__(self, adapters: Iterable[ReactiveAdapter] = ()) -> None:
        super().__init__()
        self._adapters: tuple[ReactiveAdapter, ...] = tuple(adapters)
        self._write_lock = threading.Lock()

    def register(self, adapter: ReactiveAdapter) -> None:
        with self._write_lock:
            self._adapters = (*self._adapters, adapter)

    def has_adapters(self) -> bool:
        return bool(self._adapters)

    def adapters(self) -> tuple[ReactiveAdapter, ...]:
        return self._adapters

    @override
    def get_adapter(self, reactive_type: type) -> ReactiveAdapter | None:
        if not isinstance(reactive_type, type):
            return None
        adapters = self._adapters
        for adapter in adapters:
            if adapter.reactive_type is reactive_type:
                return adapter
        for adapter in adapters:
            if issubclass(reactive_type, adapter.reactive_type):
                return adapter
        return None


@lru_cache(maxsize=1)
def get_shared_registry() -> ReactiveAdapterRegistry:
    return ReactiveAdapterRegistry(default_adapters())
