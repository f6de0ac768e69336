"""Tests for runtime class resolution and collection peeking."""

from collections.abc import Hashable, Sized

import pytest

from naming_conventions.domain.entities import (
    PlainInstance,
    ProxyInstance,
    SyntheticInstance,
)
from naming_conventions.domain.exceptions import IllegalStateError
from naming_conventions.domain.services import ClassResolver, peek_element
from naming_conventions.infrastructure.proxy import get_proxy_class, new_proxy_instance
from tests.sample_types import (
    EnhancedProduct,
    InconsistentCollection,
    NoneFirstCollection,
    Outer,
    Product,
    RecordingHandler,
    Repository,
    Widget,
)


@pytest.fixture
def resolver(introspector) -> ClassResolver:
    return ClassResolver(introspector)


class TestClassify:
    def test_plain_instance(self, resolver):
        assert resolver.classify(Product()) == PlainInstance(value_type=Product)

    def test_proxy_instance(self, resolver):
        proxy = new_proxy_instance((Widget, Repository), RecordingHandler())
        shape = resolver.classify(proxy)
        assert isinstance(shape, ProxyInstance)
        assert shape.interfaces == (Widget, Repository)

    def test_synthetic_instance(self, resolver):
        shape = resolver.classify(EnhancedProduct())
        assert shape == SyntheticInstance(value_type=EnhancedProduct, superclass=Product)

    def test_nested_class_with_separator_is_plain(self, resolver):
        nested = type("Inner$1", (Product,), {"__qualname__": "Outer.Inner$1"})
        assert isinstance(resolver.classify(nested()), PlainInstance)

    def test_custom_synthetic_separator(self, introspector):
        resolver = ClassResolver(introspector, synthetic_separator="__Enhanced")
        enhanced = type("Product__Enhanced", (Product,), {})
        assert resolver.class_for_value(enhanced()) is Product


class TestClassForValue:
    def test_plain_instance_keeps_its_type(self, resolver):
        assert resolver.class_for_value(Outer.Inner()) is Outer.Inner

    def test_synthetic_subclass_resolves_to_superclass(self, resolver):
        assert resolver.class_for_value(EnhancedProduct()) is Product

    def test_proxy_resolves_to_first_interface(self, resolver):
        proxy = new_proxy_instance((Repository, Widget), RecordingHandler())
        assert resolver.class_for_value(proxy) is Repository

    def test_proxy_skips_language_interfaces(self, resolver):
        proxy = new_proxy_instance((Hashable, Widget), RecordingHandler())
        assert resolver.class_for_value(proxy) is Widget

    def test_proxy_with_only_language_interfaces_keeps_proxy_class(self, resolver):
        proxy = new_proxy_instance((Sized,), RecordingHandler())
        assert resolver.class_for_value(proxy) is get_proxy_class(Sized)


class TestPeekElement:
    def test_returns_first_element(self):
        first = Product()
        assert peek_element([first, Product()]) is first

    def test_follows_iteration_order(self):
        assert peek_element(range(5, 10)) == 5

    def test_empty_iteration_is_illegal_state(self):
        with pytest.raises(IllegalStateError, match="no element found"):
            peek_element(InconsistentCollection())

    def test_none_first_element_is_illegal_state(self):
        with pytest.raises(IllegalStateError, match="only None element found"):
            peek_element(NoneFirstCollection())

    def test_error_names_the_container(self):
        with pytest.raises(IllegalStateError) as exc_info:
            peek_element(NoneFirstCollection())
        assert exc_info.value.derivation == "peek"
        assert exc_info.value.subject == "NoneFirstCollection"
