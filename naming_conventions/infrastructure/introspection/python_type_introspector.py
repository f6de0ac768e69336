from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any, TypeVar, get_args, get_origin, override

from ...application.ports.services import TypeIntrospectorPort
from ...constants import LanguageInterfaces
from ...domain.entities.type_descriptor import TypeDescriptor, is_collection_like_type
from ..proxy.dynamic_proxy import is_proxy_class, proxy_interfaces

if TYPE_CHECKING:
    from collections.abc import Iterator

_LOCALS_MARKER = "<locals>."


def decapitalize(name: str) -> str:
    """Lower-case the first character unless the name starts with two capitals.

    ``"FooBah"`` becomes ``"fooBah"`` and ``"X"`` becomes ``"x"``, but
    ``"URL"`` stays ``"URL"``.
    """
    if not name:
        return name
    if len(name) > 1 and name[0].isupper() and name[1].isupper():
        return name
    return name[0].lower() + name[1:]


def _as_class(annotation: Any) -> type | None:
    if annotation is Any or isinstance(annotation, TypeVar):
        return None
    return TypeDescriptor.of(annotation).raw_type


class PythonTypeIntrospector(TypeIntrospectorPort):
    pass

    @override
    def short_name(self, tp: type) -> str:
        qualname = tp.__qualname__
        if _LOCALS_MARKER in qualname:
            qualname = qualname.rsplit(_LOCALS_MARKER, 1)[1]
        return qualname

    @override
    def short_name_as_property(self, tp: type) -> str:
        short_name = self.short_name(tp)
        return decapitalize(short_name.rsplit(".", 1)[-1])

    @override
    def resolve_collection_element_type(
        self, descriptor: TypeDescriptor
    ) -> type | None:
        raw = descriptor.raw_type
        if raw is None:
            return None
        if descriptor.type_arguments:
            return self._element_from_arguments(raw, descriptor.type_arguments)
        return self._element_from_bases(raw)

    @override
    def resolve_nested_type(
        self, descriptor: TypeDescriptor, index: int = 0
    ) -> type | None:
        args = descriptor.type_arguments
        if not -len(args) <= index < len(args):
            return None
        return _as_class(args[index])

    @override
    def proxy_interfaces(self, tp: type) -> tuple[type, ...] | None:
        if not is_proxy_class(tp):
            return None
        return proxy_interfaces(tp)

    @override
    def is_language_interface(self, tp: type) -> bool:
        return tp.__module__ in LanguageInterfaces.MODULES

    @override
    def has_enclosing_class(self, tp: type) -> bool:
        prefix = tp.__qualname__.rpartition(".")[0]
        return bool(prefix) and not prefix.endswith("<locals>")

    @override
    def superclass(self, tp: type) -> type:
        return tp.__bases__[0] if tp.__bases__ else object

    def _element_from_arguments(
        self, raw: type, args: tuple[Any, ...]
    ) -> type | None:
        if raw is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return _as_class(args[0])
            if all(arg == args[0] for arg in args):
                return _as_class(args[0])
            return None
        return _as_class(args[0])

    def _element_from_bases(self, raw: type) -> type | None:
        for base in self._generic_bases(raw):
            origin = get_origin(base)
            if not is_collection_like_type(origin) or not get_args(base):
                continue
            element_type = self._element_from_arguments(origin, get_args(base))
            if element_type is not None:
                return element_type
        return None

    def _generic_bases(self, raw: type) -> Iterator[Any]:
        for klass in raw.__mro__:
            yield from types.get_original_bases(klass)
