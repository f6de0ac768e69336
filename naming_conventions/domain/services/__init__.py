"""Domain services.

Name inference and the helpers it is built from.
"""

from .attribute_names import attribute_name_to_property_name, qualified_attribute_name
from .class_resolution import ClassResolver, peek_element
from .element_resolution import (
    ElementResolutionRequest,
    ElementTypeResolver,
    ElementTypeStrategy,
    RuntimeValueStrategy,
    StaticGenericStrategy,
)
from ..entities.type_descriptor import component_type_for_typecode
from .name_inferencer import NameInferencer

__all__ = [
    "NameInferencer",
    "component_type_for_typecode",
    # Class resolution
    "ClassResolver",
    "peek_element",
    # Element type resolution
    "ElementResolutionRequest",
    "ElementTypeResolver",
    "ElementTypeStrategy",
    "RuntimeValueStrategy",
    "StaticGenericStrategy",
    # Attribute names
    "attribute_name_to_property_name",
    "qualified_attribute_name",
]
