"""Dynamic proxy classes.

A proxy class subclasses ``ProxyBase`` plus a tuple of interface classes and
routes every public or abstract interface method to an invocation handler.
Proxy classes are generated once per interface tuple and named ``$ProxyN``.
"""

from __future__ import annotations

from collections.abc import Callable
import itertools
import threading
from typing import Any, ClassVar, Protocol

from ...constants import Defaults


class InvocationHandler(Protocol):
    def invoke(
        self,
        proxy: ProxyBase,
        name: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any: ...


class ProxyBase:
    __proxy_interfaces__: ClassVar[tuple[type, ...]] = ()

    def __init__(self, handler: InvocationHandler) -> None:
        # Interface constructors never run; proxies carry no interface state.
        self._handler = handler

    @property
    def invocation_handler(self) -> InvocationHandler:
        return self._handler

    def __repr__(self) -> str:
        names = ", ".join(iface.__qualname__ for iface in self.__proxy_interfaces__)
        return f"<{type(self).__name__} proxy for ({names})>"


_proxy_classes: dict[tuple[type, ...], type[ProxyBase]] = {}
_proxy_lock = threading.Lock()
_proxy_counter = itertools.count()


def _interface_methods(interfaces: tuple[type, ...]) -> set[str]:
    names: set[str] = set()
    for interface in interfaces:
        names.update(getattr(interface, "__abstractmethods__", ()))
        for klass in interface.__mro__:
            if klass is object:
                continue
            for name, attribute in vars(klass).items():
                if not name.startswith("_") and callable(attribute):
                    names.add(name)
    return names


def _forwarder(name: str) -> Callable[..., Any]:
    def method(self: ProxyBase, *args: Any, **kwargs: Any) -> Any:
        return self._handler.invoke(self, name, args, kwargs)

    method.__name__ = name
    return method


def get_proxy_class(*interfaces: type) -> type[ProxyBase]:
    if not interfaces:
        raise ValueError("A proxy class needs at least one interface")
    for interface in interfaces:
        if not isinstance(interface, type):
            raise TypeError(f"{interface!r} is not a class")
    with _proxy_lock:
        proxy_class = _proxy_classes.get(interfaces)
        if proxy_class is None:
            namespace: dict[str, Any] = {
                name: _forwarder(name) for name in _interface_methods(interfaces)
            }
            namespace["__proxy_interfaces__"] = interfaces
            namespace["__module__"] = __name__
            name = f"{Defaults.PROXY_CLASS_PREFIX}{next(_proxy_counter)}"
            proxy_class = type(name, (ProxyBase, *interfaces), namespace)
            _proxy_classes[interfaces] = proxy_class
    return proxy_class


def new_proxy_instance(
    interfaces: tuple[type, ...], handler: InvocationHandler
) -> ProxyBase:
    return get_proxy_class(*interfaces)(handler)


def is_proxy_class(tp: object) -> bool:
    return isinstance(tp, type) and issubclass(tp, ProxyBase) and tp is not ProxyBase


def proxy_interfaces(tp: type) -> tuple[type, ...]:
    if not is_proxy_class(tp):
        raise TypeError(f"{tp!r} is not a proxy class")
    return tp.__proxy_interfaces__
