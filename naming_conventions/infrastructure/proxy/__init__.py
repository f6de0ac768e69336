"""Dynamic proxy support."""

from .dynamic_proxy import (
    InvocationHandler,
    ProxyBase,
    get_proxy_class,
    is_proxy_class,
    new_proxy_instance,
    proxy_interfaces,
)

__all__ = [
    "InvocationHandler",
    "ProxyBase",
    "get_proxy_class",
    "is_proxy_class",
    "new_proxy_instance",
    "proxy_interfaces",
]
