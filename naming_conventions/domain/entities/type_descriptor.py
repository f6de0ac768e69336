from __future__ import annotations

import array
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
import inspect
import types
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from ...constants import Derivations, Typecodes
from ..exceptions import InvalidArgumentError

_NON_COLLECTION_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bytearray,
    memoryview,
    Mapping,
    array.array,
)


def _is_record_type(tp: type) -> bool:
    # NamedTuple classes are records, not sequences.
    return issubclass(tp, tuple) and hasattr(tp, "_fields")


def is_collection_like_type(tp: object) -> bool:
    if tp is array.array:
        return True
    if not isinstance(tp, type) or _is_record_type(tp):
        return False
    return issubclass(tp, Collection) and not issubclass(tp, _NON_COLLECTION_TYPES)


def is_collection_like_value(value: object) -> bool:
    return is_collection_like_type(type(value)) and not isinstance(value, array.array)


def component_type_for_typecode(typecode: str) -> type:
    if typecode in Typecodes.INTEGER:
        return int
    if typecode in Typecodes.FLOAT:
        return float
    if typecode in Typecodes.TEXT:
        return str
    raise InvalidArgumentError(
        f"Unsupported array typecode {typecode!r}",
        derivation=Derivations.VALUE,
        subject=typecode,
    )


def _strip_annotation(annotation: Any) -> Any:
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return _strip_annotation(members[0])
    return annotation


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    annotation: Any

    @classmethod
    def of(cls, annotation: Any) -> TypeDescriptor:
        if annotation is None:
            annotation = type(None)
        return cls(_strip_annotation(annotation))

    @property
    def raw_type(self) -> type | None:
        if self.annotation is Any:
            return object
        origin = get_origin(self.annotation)
        if origin in (Union, types.UnionType):
            return None
        candidate = origin if origin is not None else self.annotation
        return candidate if isinstance(candidate, type) else None

    @property
    def type_arguments(self) -> tuple[Any, ...]:
        return get_args(self.annotation)

    @property
    def is_any(self) -> bool:
        return self.raw_type is None or self.raw_type is object

    @property
    def is_array(self) -> bool:
        raw = self.raw_type
        args = self.type_arguments
        if raw is tuple:
            return len(args) == 2 and args[1] is Ellipsis
        return raw is array.array and len(args) == 1

    @property
    def component_type(self) -> TypeDescriptor | None:
        if not self.is_array:
            return None
        return TypeDescriptor.of(self.type_arguments[0])

    @property
    def is_collection_like(self) -> bool:
        return not self.is_array and is_collection_like_type(self.raw_type)

    def argument(self, index: int) -> TypeDescriptor | None:
        args = self.type_arguments
        if not -len(args) <= index < len(args):
            return None
        return TypeDescriptor.of(args[index])


def _resolve_hints(owner: Callable[..., Any]) -> dict[str, Any]:
    target = inspect.unwrap(owner)
    try:
        return get_type_hints(target)
    except (NameError, TypeError):
        return dict(getattr(target, "__annotations__", {}))


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    owner: Callable[..., Any]
    name: str

    @classmethod
    def for_parameter(
        cls, owner: Callable[..., Any], parameter: str | int
    ) -> ParameterDescriptor:
        names = list(inspect.signature(owner).parameters)
        if isinstance(parameter, int):
            if not -len(names) <= parameter < len(names):
                raise IndexError(
                    f"Parameter index {parameter} out of range for {owner.__qualname__}"
                )
            return cls(owner, names[parameter])
        if parameter not in names:
            raise KeyError(f"{owner.__qualname__} has no parameter named {parameter!r}")
        return cls(owner, parameter)

    @property
    def is_annotated(self) -> bool:
        return self.name in _resolve_hints(self.owner)

    @property
    def declared_type(self) -> TypeDescriptor:
        return TypeDescriptor.of(_resolve_hints(self.owner).get(self.name, Any))

    def nested(self, index: int = 0) -> TypeDescriptor | None:
        return self.declared_type.argument(index)

    def describe(self) -> str:
        return f"parameter {self.name!r} of {self.owner.__qualname__}"


@dataclass(frozen=True, slots=True)
class ReturnDescriptor:
    owner: Callable[..., Any]

    @classmethod
    def for_callable(cls, owner: Callable[..., Any]) -> ReturnDescriptor:
        return cls(owner)

    @property
    def declared_type(self) -> TypeDescriptor:
        hints = _resolve_hints(self.owner)
        if "return" not in hints:
            return TypeDescriptor(object)
        return TypeDescriptor.of(hints["return"])

    def nested(self, index: int = 0) -> TypeDescriptor | None:
        return self.declared_type.argument(index)

    def describe(self) -> str:
        return f"return type of {self.owner.__qualname__}"


@dataclass(frozen=True, slots=True)
class ReactiveAdapter:
    reactive_type: type
    value_index: int = 0
    no_value: bool = False
