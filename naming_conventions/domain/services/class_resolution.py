"""Class resolution for runtime values.

Runtime enhancement and proxying must not leak implementation type names
into derived identifiers, so every value is first classified into one of a
closed set of shapes and then mapped to the type it should be named after.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING

from ...constants import Defaults, Derivations
from ..entities.value_shape import (
    PlainInstance,
    ProxyInstance,
    SyntheticInstance,
    ValueShape,
)
from ..exceptions import IllegalStateError

if TYPE_CHECKING:
    from ...application.ports.services import TypeIntrospectorPort


class ClassResolver:
    pass

    def __init__(
        self,
        introspector: TypeIntrospectorPort,
        *,
        synthetic_separator: str = Defaults.SYNTHETIC_SEPARATOR,
    ) -> None:
        super().__init__()
        self._introspector = introspector
        self._synthetic_separator = synthetic_separator

    def classify(self, value: object) -> ValueShape:
        value_type = type(value)
        interfaces = self._introspector.proxy_interfaces(value_type)
        if interfaces is not None:
            return ProxyInstance(value_type=value_type, interfaces=interfaces)
        if self._synthetic_separator in value_type.__name__ and (
            not self._introspector.has_enclosing_class(value_type)
        ):
            return SyntheticInstance(
                value_type=value_type,
                superclass=self._introspector.superclass(value_type),
            )
        return PlainInstance(value_type=value_type)

    def class_for_value(self, value: object) -> type:
        shape = self.classify(value)
        if isinstance(shape, ProxyInstance):
            for interface in shape.interfaces:
                if not self._introspector.is_language_interface(interface):
                    return interface
            # Only language interfaces: name the proxy class itself.
            return shape.value_type
        if isinstance(shape, SyntheticInstance):
            return shape.superclass
        return shape.value_type


def peek_element[E](container: Collection[E]) -> E:
    """Return the first element the container yields when iterated.

    The element picked depends entirely on the container's iteration order.
    """
    iterator = iter(container)
    try:
        element = next(iterator)
    except StopIteration:
        raise IllegalStateError(
            "Unable to peek ahead in non-empty collection - no element found",
            derivation=Derivations.PEEK,
            subject=type(container).__name__,
        ) from None
    if element is None:
        raise IllegalStateError(
            "Unable to peek ahead in non-empty collection - only None element found",
            derivation=Derivations.PEEK,
            subject=type(container).__name__,
        )
    return element
