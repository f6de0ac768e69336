"""Module-level shortcuts for the naming conventions.

These functions use a shared inferencer built from the default container,
with the process-wide async wrapper registry and a silent logger.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from .domain.entities.type_descriptor import ParameterDescriptor, ReturnDescriptor
from .domain.services.name_inferencer import NameInferencer
from .infrastructure.container import create_default_container


@lru_cache(maxsize=1)
def get_default_inferencer() -> NameInferencer:
    return create_default_container(use_null_logger=True).create_name_inferencer()


def get_variable_name(value: object) -> str:
    """Determine the conventional variable name for ``value``.

    For example ``Product()`` becomes ``"product"``, ``MyProduct()`` becomes
    ``"myProduct"`` and ``UKProduct()`` becomes ``"UKProduct"``. Arrays and
    collections use the pluralized name of their element type.
    """
    return get_default_inferencer().infer_from_value(value)


def get_variable_name_for_parameter(
    func: Callable[..., Any], parameter: str | int
) -> str:
    """Determine the conventional variable name for a parameter of ``func``.

    ``Future[Product]`` becomes ``"productFuture"`` and ``list[MyProduct]``
    becomes ``"myProductList"``.
    """
    descriptor = ParameterDescriptor.for_parameter(func, parameter)
    return get_default_inferencer().infer_from_parameter_type(descriptor)


def get_variable_name_for_return_type(
    func: Callable[..., Any],
    value: object = None,
    *,
    resolved_type: Any = None,
) -> str:
    """Determine the conventional variable name for the return type of ``func``.

    Falls back on ``value`` when the declaration is not specific enough, such
    as an ``object`` return type or an untyped collection.
    """
    descriptor = ReturnDescriptor.for_callable(func)
    return get_default_inferencer().infer_from_return_type(
        descriptor, resolved_type, value
    )


def attribute_name_to_property_name(attribute_name: str) -> str:
    return get_default_inferencer().attribute_name_to_property_name(attribute_name)


def get_qualified_attribute_name(scope: str | type, attribute_name: str) -> str:
    return get_default_inferencer().qualified_attribute_name(scope, attribute_name)
