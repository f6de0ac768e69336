"""Naming conventions package.

Derives the conventional variable name a framework uses to refer to a
value, a declared parameter or a callable's return value.

Features:
- Value names from runtime types, with proxy and synthetic-class unwrapping
- Parameter and return-type names from annotations, including generics
- Async wrapper suffixes (``productFuture``)
- Attribute-name to property-name conversion and qualified attribute names
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("naming-conventions")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from naming_conventions.conventions import (
    attribute_name_to_property_name,
    get_qualified_attribute_name,
    get_variable_name,
    get_variable_name_for_parameter,
    get_variable_name_for_return_type,
)
from naming_conventions.domain.exceptions import (
    IllegalStateError,
    InvalidArgumentError,
    NamingConventionError,
)
from naming_conventions.domain.services.name_inferencer import NameInferencer

__all__ = [
    "__version__",
    # Shortcuts
    "get_variable_name",
    "get_variable_name_for_parameter",
    "get_variable_name_for_return_type",
    "attribute_name_to_property_name",
    "get_qualified_attribute_name",
    # Inferencer
    "NameInferencer",
    # Errors
    "NamingConventionError",
    "InvalidArgumentError",
    "IllegalStateError",
]
