"""Domain entities.

Descriptors for declared types, parameters and return values, plus the
closed set of runtime value shapes used for class resolution.
"""

from .type_descriptor import (
    ParameterDescriptor,
    ReactiveAdapter,
    ReturnDescriptor,
    TypeDescriptor,
    component_type_for_typecode,
    is_collection_like_type,
    is_collection_like_value,
)
from .value_shape import PlainInstance, ProxyInstance, SyntheticInstance, ValueShape

__all__ = [
    # Type descriptors
    "TypeDescriptor",
    "ParameterDescriptor",
    "ReturnDescriptor",
    "ReactiveAdapter",
    "component_type_for_typecode",
    "is_collection_like_type",
    "is_collection_like_value",
    # Value shapes
    "PlainInstance",
    "ProxyInstance",
    "SyntheticInstance",
    "ValueShape",
]
