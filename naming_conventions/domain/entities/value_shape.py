from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlainInstance:
    value_type: type


@dataclass(frozen=True, slots=True)
class ProxyInstance:
    value_type: type
    interfaces: tuple[type, ...]


@dataclass(frozen=True, slots=True)
class SyntheticInstance:
    value_type: type
    superclass: type


type ValueShape = PlainInstance | ProxyInstance | SyntheticInstance
