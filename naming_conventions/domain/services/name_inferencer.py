"""Conventional variable names for values, parameters and return types.

The naming convention is the decapitalized short name of the type, following
JavaBeans property rules:

- ``myapp.Product`` becomes ``"product"``
- ``myapp.MyProduct`` becomes ``"myProduct"``
- ``myapp.UKProduct`` becomes ``"UKProduct"``

Arrays and collections use the pluralized name of their element type
(``"productList"``). Declared async wrapper types append the wrapper's short
name to the name of the value type they carry (``"productFuture"``).
"""

from __future__ import annotations

import array
from collections.abc import Collection
import reprlib
from typing import TYPE_CHECKING, Any, cast

from ...config import ConventionsConfig
from ...constants import Derivations
from ..entities.type_descriptor import (
    ParameterDescriptor,
    ReturnDescriptor,
    TypeDescriptor,
    component_type_for_typecode,
    is_collection_like_value,
)
from ..exceptions import InvalidArgumentError, NamingConventionError
from .attribute_names import attribute_name_to_property_name, qualified_attribute_name
from .class_resolution import ClassResolver, peek_element
from .element_resolution import (
    ElementResolutionRequest,
    ElementTypeResolver,
    RuntimeValueStrategy,
    StaticGenericStrategy,
)

if TYPE_CHECKING:
    from ...application.ports.services import (
        LoggerPort,
        ReactiveAdapterRegistryPort,
        TypeIntrospectorPort,
    )


def _describe(value: object) -> str:
    return reprlib.repr(value)


class NameInferencer:
    pass

    def __init__(
        self,
        introspector: TypeIntrospectorPort,
        adapter_registry: ReactiveAdapterRegistryPort,
        logger: LoggerPort,
        *,
        config: ConventionsConfig | None = None,
    ) -> None:
        super().__init__()
        self._introspector = introspector
        self._adapter_registry = adapter_registry
        self._config = config or ConventionsConfig()
        self._logger = logger
        self._class_resolver = ClassResolver(
            introspector, synthetic_separator=self._config.synthetic_separator
        )
        static = StaticGenericStrategy(introspector)
        self._parameter_elements = ElementTypeResolver([static])
        self._return_elements = ElementTypeResolver(
            [static, RuntimeValueStrategy(self._class_resolver, logger)]
        )

    @property
    def config(self) -> ConventionsConfig:
        return self._config

    @property
    def class_resolver(self) -> ClassResolver:
        return self._class_resolver

    def infer_from_value(self, value: object) -> str:
        subject = _describe(value)
        try:
            name = self._name_for_value(value)
        except NamingConventionError as exc:
            self._logger.log_inference_failed(Derivations.VALUE, subject, str(exc))
            raise
        self._logger.log_inference(Derivations.VALUE, subject, name)
        return name

    def infer_from_parameter_type(self, descriptor: ParameterDescriptor) -> str:
        if descriptor is None:
            raise InvalidArgumentError(
                "ParameterDescriptor must not be None",
                derivation=Derivations.PARAMETER,
                subject=descriptor,
            )
        subject = descriptor.describe()
        try:
            name = self._name_for_parameter(descriptor, subject)
        except NamingConventionError as exc:
            self._logger.log_inference_failed(Derivations.PARAMETER, subject, str(exc))
            raise
        self._logger.log_inference(Derivations.PARAMETER, subject, name)
        return name

    def infer_from_return_type(
        self,
        descriptor: ReturnDescriptor,
        resolved_type: Any = None,
        value: object = None,
    ) -> str:
        """Name the return value of a callable.

        ``resolved_type`` defaults to the declared return annotation. When the
        declaration is not specific enough (``object``, ``Any``, no
        annotation, or an untyped collection) the name falls back on ``value``.
        """
        if descriptor is None:
            raise InvalidArgumentError(
                "ReturnDescriptor must not be None",
                derivation=Derivations.RETURN,
                subject=descriptor,
            )
        subject = descriptor.describe()
        try:
            name = self._name_for_return(descriptor, resolved_type, value, subject)
        except NamingConventionError as exc:
            self._logger.log_inference_failed(Derivations.RETURN, subject, str(exc))
            raise
        self._logger.log_inference(Derivations.RETURN, subject, name)
        return name

    def attribute_name_to_property_name(self, attribute_name: str) -> str:
        return attribute_name_to_property_name(
            attribute_name, separator=self._config.attribute_separator
        )

    def qualified_attribute_name(self, scope: str | type, attribute_name: str) -> str:
        return qualified_attribute_name(
            scope, attribute_name, separator=self._config.qualifier_separator
        )

    def pluralize(self, name: str) -> str:
        return name + self._config.plural_suffix

    def _name_for_value(self, value: object) -> str:
        if value is None:
            raise InvalidArgumentError(
                "Value must not be None", derivation=Derivations.VALUE, subject=value
            )
        pluralize = False
        if isinstance(value, array.array):
            value_type = component_type_for_typecode(value.typecode)
            pluralize = True
        elif is_collection_like_value(value):
            collection = cast("Collection[object]", value)
            if len(collection) == 0:
                raise InvalidArgumentError(
                    "Cannot generate variable name for an empty collection",
                    derivation=Derivations.VALUE,
                    subject=_describe(value),
                )
            value_type = self._class_resolver.class_for_value(peek_element(collection))
            pluralize = True
        else:
            value_type = self._class_resolver.class_for_value(value)
        name = self._introspector.short_name_as_property(value_type)
        return self.pluralize(name) if pluralize else name

    def _name_for_parameter(self, descriptor: ParameterDescriptor, subject: str) -> str:
        declared = descriptor.declared_type
        if not descriptor.is_annotated or declared.raw_type is None:
            raise InvalidArgumentError(
                "Cannot generate variable name for an untyped parameter",
                derivation=Derivations.PARAMETER,
                subject=subject,
            )
        request = ElementResolutionRequest(
            descriptors=(declared,),
            derivation=Derivations.PARAMETER,
            subject=subject,
            kind="parameter type",
        )
        return self._name_for_type(declared, request, self._parameter_elements)

    def _name_for_return(
        self,
        descriptor: ReturnDescriptor,
        resolved_type: Any,
        value: object,
        subject: str,
    ) -> str:
        declared = descriptor.declared_type
        resolved = declared if resolved_type is None else TypeDescriptor.of(resolved_type)
        if resolved.is_any:
            if value is None:
                raise InvalidArgumentError(
                    "Cannot generate variable name for an untyped return type with None value",
                    derivation=Derivations.RETURN,
                    subject=subject,
                )
            self._logger.log_fallback(
                Derivations.RETURN, subject, "untyped return type, naming the value"
            )
            return self._name_for_value(value)
        descriptors = (resolved,) if resolved == declared else (resolved, declared)
        request = ElementResolutionRequest(
            descriptors=descriptors,
            derivation=Derivations.RETURN,
            subject=subject,
            kind="return type",
            value=value,
        )
        return self._name_for_type(resolved, request, self._return_elements)

    def _name_for_type(
        self,
        target: TypeDescriptor,
        request: ElementResolutionRequest,
        elements: ElementTypeResolver,
    ) -> str:
        pluralize = False
        suffix = ""
        if target.is_array:
            component = target.component_type
            value_type = (component.raw_type if component else None) or object
            pluralize = True
        elif target.is_collection_like:
            value_type = elements.resolve(request)
            pluralize = True
        else:
            value_type = cast("type", target.raw_type)
            adapter = self._adapter_registry.get_adapter(value_type)
            if adapter is not None and not adapter.no_value:
                nested = self._nested_type(request.descriptors, adapter.value_index)
                if nested is not None:
                    suffix = self._introspector.short_name(value_type)
                    value_type = nested
        name = self._introspector.short_name_as_property(value_type)
        self._logger.debug(
            f"{request.derivation}: element type {value_type.__qualname__}"
            f" (pluralize={pluralize}, suffix={suffix!r})"
        )
        return self.pluralize(name) if pluralize else name + suffix

    def _nested_type(
        self, descriptors: tuple[TypeDescriptor, ...], index: int
    ) -> type | None:
        for descriptor in descriptors:
            nested = self._introspector.resolve_nested_type(descriptor, index)
            if nested is not None:
                return nested
        return None
