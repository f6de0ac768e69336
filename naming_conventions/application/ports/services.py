from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.type_descriptor import ReactiveAdapter, TypeDescriptor


@runtime_checkable
class TypeIntrospectorPort(Protocol):
    pass

    def short_name(self, tp: type) -> str: ...

    def short_name_as_property(self, tp: type) -> str: ...

    def resolve_collection_element_type(
        self, descriptor: TypeDescriptor
    ) -> type | None: ...

    def resolve_nested_type(
        self, descriptor: TypeDescriptor, index: int = 0
    ) -> type | None: ...

    def proxy_interfaces(self, tp: type) -> tuple[type, ...] | None: ...

    def is_language_interface(self, tp: type) -> bool: ...

    def has_enclosing_class(self, tp: type) -> bool: ...

    def superclass(self, tp: type) -> type: ...


@runtime_checkable
class ReactiveAdapterRegistryPort(Protocol):
    pass

    def get_adapter(self, reactive_type: type) -> ReactiveAdapter | None: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_inference(self, derivation: str, subject: str, name: str) -> None: ...

    def log_fallback(self, derivation: str, subject: str, reason: str) -> None: ...

    def log_inference_failed(
        self, derivation: str, subject: str, reason: str
    ) -> None: ...

    def log_target_start(self, target: str) -> None: ...

    def log_final_stats(self) -> None: ...
