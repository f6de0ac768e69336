import pytest

from naming_conventions.config import ConventionsConfig
from naming_conventions.domain.services.name_inferencer import NameInferencer
from naming_conventions.infrastructure.introspection import PythonTypeIntrospector
from naming_conventions.infrastructure.logging import NullLogger
from naming_conventions.infrastructure.reactive import (
    ReactiveAdapterRegistry,
    default_adapters,
)

_CONFIG_ENV_VARS = (
    "NAMING_PLURAL_SUFFIX",
    "NAMING_SYNTHETIC_SEPARATOR",
    "NAMING_ATTRIBUTE_SEPARATOR",
    "NAMING_QUALIFIER_SEPARATOR",
)


@pytest.fixture(autouse=True)
def _clean_naming_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer overrides of the naming settings out of the tests."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def introspector() -> PythonTypeIntrospector:
    return PythonTypeIntrospector()


@pytest.fixture
def adapter_registry() -> ReactiveAdapterRegistry:
    return ReactiveAdapterRegistry(default_adapters())


@pytest.fixture
def inferencer(
    introspector: PythonTypeIntrospector, adapter_registry: ReactiveAdapterRegistry
) -> NameInferencer:
    return NameInferencer(
        introspector, adapter_registry, NullLogger(), config=ConventionsConfig()
    )
