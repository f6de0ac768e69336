"""Tests for dynamic proxy classes."""

import pytest

from naming_conventions.infrastructure.proxy import (
    ProxyBase,
    get_proxy_class,
    is_proxy_class,
    new_proxy_instance,
    proxy_interfaces,
)
from tests.sample_types import Product, RecordingHandler, Repository, Service, Widget


class TestProxyClasses:
    def test_proxy_class_is_cached_per_interface_tuple(self):
        assert get_proxy_class(Widget) is get_proxy_class(Widget)
        assert get_proxy_class(Widget) is not get_proxy_class(Widget, Repository)

    def test_proxy_class_name(self):
        assert get_proxy_class(Repository).__name__.startswith("$Proxy")

    def test_proxy_implements_interfaces(self):
        proxy = new_proxy_instance((Widget, Repository), RecordingHandler())
        assert isinstance(proxy, Widget)
        assert isinstance(proxy, Repository)

    def test_requires_an_interface(self):
        with pytest.raises(ValueError):
            get_proxy_class()

    def test_rejects_non_class_interfaces(self):
        with pytest.raises(TypeError):
            get_proxy_class("Widget")


class TestInvocation:
    def test_calls_are_routed_to_handler(self):
        handler = RecordingHandler()
        proxy = new_proxy_instance((Repository,), handler)
        assert proxy.find("key") == "find called"
        assert handler.calls == [("find", ("key",))]

    def test_invocation_handler_is_exposed(self):
        handler = RecordingHandler()
        proxy = new_proxy_instance((Widget,), handler)
        assert proxy.invocation_handler is handler

    def test_interface_constructor_is_not_called(self):
        handler = RecordingHandler()
        proxy = new_proxy_instance((Service,), handler)
        assert isinstance(proxy, Service)
        assert proxy.describe() == "describe called"
        assert handler.calls == [("describe", ())]


class TestProxyMetadata:
    def test_is_proxy_class(self):
        assert is_proxy_class(get_proxy_class(Widget))
        assert not is_proxy_class(ProxyBase)
        assert not is_proxy_class(Product)
        assert not is_proxy_class(Widget)

    def test_proxy_interfaces(self):
        assert proxy_interfaces(get_proxy_class(Widget, Repository)) == (
            Widget,
            Repository,
        )

    def test_proxy_interfaces_of_plain_class(self):
        with pytest.raises(TypeError):
            proxy_interfaces(Product)
