"""Tests for the ordered element-type resolution strategies."""

import pytest

from naming_conventions.domain.entities import TypeDescriptor
from naming_conventions.domain.exceptions import InvalidArgumentError
from naming_conventions.domain.services import (
    ClassResolver,
    ElementResolutionRequest,
    ElementTypeResolver,
    RuntimeValueStrategy,
    StaticGenericStrategy,
)
from naming_conventions.infrastructure.logging import ConsoleLogger, LogLevel
from tests.sample_types import MyProduct, Product


def _request(annotation, value=None):
    return ElementResolutionRequest(
        descriptors=(TypeDescriptor.of(annotation),),
        derivation="return",
        subject="test",
        kind="return type",
        value=value,
    )


class _Unresolved:
    def __init__(self):
        self.calls = 0

    def resolve(self, request):
        self.calls += 1
        return None


class TestStaticGenericStrategy:
    def test_resolves_generic_argument(self, introspector):
        strategy = StaticGenericStrategy(introspector)
        assert strategy.resolve(_request(list[Product])) is Product

    def test_erased_generic_is_unresolved(self, introspector):
        strategy = StaticGenericStrategy(introspector)
        assert strategy.resolve(_request(list)) is None

    def test_tries_each_descriptor(self, introspector):
        strategy = StaticGenericStrategy(introspector)
        request = ElementResolutionRequest(
            descriptors=(TypeDescriptor.of(list), TypeDescriptor.of(set[MyProduct])),
            derivation="return",
            subject="test",
            kind="return type",
        )
        assert strategy.resolve(request) is MyProduct


class TestRuntimeValueStrategy:
    @pytest.fixture
    def strategy(self, introspector):
        return RuntimeValueStrategy(
            ClassResolver(introspector), ConsoleLogger(verbosity=LogLevel.NORMAL)
        )

    def test_missing_value_is_unresolved(self, strategy):
        assert strategy.resolve(_request(list)) is None

    def test_peeks_at_value(self, strategy):
        assert strategy.resolve(_request(list, [MyProduct()])) is MyProduct

    def test_counts_fallback(self, introspector):
        logger = ConsoleLogger(verbosity=LogLevel.NORMAL)
        strategy = RuntimeValueStrategy(ClassResolver(introspector), logger)
        strategy.resolve(_request(list, [Product()]))
        assert logger.get_stats()["fallbacks"] == 1

    def test_non_collection_value_is_rejected(self, strategy):
        with pytest.raises(InvalidArgumentError, match="non-collection value"):
            strategy.resolve(_request(list, Product()))

    def test_empty_value_is_rejected(self, strategy):
        with pytest.raises(InvalidArgumentError, match="empty collection value"):
            strategy.resolve(_request(list, ()))


class TestElementTypeResolver:
    def test_first_resolving_strategy_wins(self, introspector):
        trailing = _Unresolved()
        resolver = ElementTypeResolver([StaticGenericStrategy(introspector), trailing])
        assert resolver.resolve(_request(list[Product])) is Product
        assert trailing.calls == 0

    def test_no_strategy_resolves(self):
        resolver = ElementTypeResolver([_Unresolved(), _Unresolved()])
        with pytest.raises(InvalidArgumentError) as exc_info:
            resolver.resolve(_request(list))
        assert exc_info.value.derivation == "return"
        assert "non-typed collection return type" in str(exc_info.value)
