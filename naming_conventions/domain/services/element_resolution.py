from __future__ import annotations

import array
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast

from ..entities.type_descriptor import (
    TypeDescriptor,
    component_type_for_typecode,
    is_collection_like_value,
)
from ..exceptions import InvalidArgumentError
from .class_resolution import ClassResolver, peek_element

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort, TypeIntrospectorPort


@dataclass(frozen=True, slots=True)
class ElementResolutionRequest:
    descriptors: tuple[TypeDescriptor, ...]
    derivation: str
    subject: str
    kind: str
    value: object = None


class ElementTypeStrategy(Protocol):
    def resolve(self, request: ElementResolutionRequest) -> type | None: ...


class StaticGenericStrategy:
    pass

    def __init__(self, introspector: TypeIntrospectorPort) -> None:
        super().__init__()
        self._introspector = introspector

    def resolve(self, request: ElementResolutionRequest) -> type | None:
        for descriptor in request.descriptors:
            element_type = self._introspector.resolve_collection_element_type(
                descriptor
            )
            if element_type is not None:
                return element_type
        return None


class RuntimeValueStrategy:
    pass

    def __init__(self, class_resolver: ClassResolver, logger: LoggerPort) -> None:
        super().__init__()
        self._class_resolver = class_resolver
        self._logger = logger

    def resolve(self, request: ElementResolutionRequest) -> type | None:
        value = request.value
        if value is None:
            return None
        if isinstance(value, array.array):
            self._logger.log_fallback(
                request.derivation,
                request.subject,
                f"{request.kind} is a bare array, using typecode {value.typecode!r}",
            )
            return component_type_for_typecode(value.typecode)
        if not is_collection_like_value(value):
            raise InvalidArgumentError(
                f"Cannot generate variable name for non-typed collection {request.kind} "
                "and a non-collection value",
                derivation=request.derivation,
                subject=request.subject,
            )
        collection = cast("Collection[object]", value)
        if len(collection) == 0:
            raise InvalidArgumentError(
                f"Cannot generate variable name for non-typed collection {request.kind} "
                "and an empty collection value",
                derivation=request.derivation,
                subject=request.subject,
            )
        self._logger.log_fallback(
            request.derivation,
            request.subject,
            "collection element type erased, peeking at the returned value",
        )
        return self._class_resolver.class_for_value(peek_element(collection))


class ElementTypeResolver:
    """Try each element-type strategy in order until one resolves."""

    def __init__(self, strategies: Sequence[ElementTypeStrategy]) -> None:
        super().__init__()
        self._strategies = tuple(strategies)

    def resolve(self, request: ElementResolutionRequest) -> type:
        for strategy in self._strategies:
            element_type = strategy.resolve(request)
            if element_type is not None:
                return element_type
        raise InvalidArgumentError(
            f"Cannot generate variable name for non-typed collection {request.kind}",
            derivation=request.derivation,
            subject=request.subject,
        )
