from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import ConventionsConfig
from ..domain.services.name_inferencer import NameInferencer
from .introspection.python_type_introspector import PythonTypeIntrospector
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .reactive.adapter_registry import get_shared_registry

if TYPE_CHECKING:
    from ..application.ports.services import (
        LoggerPort,
        ReactiveAdapterRegistryPort,
        TypeIntrospectorPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ConventionsConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or ConventionsConfig()
        self._logger_instance: LoggerPort | None = None
        self._type_introspector_instance: TypeIntrospectorPort | None = None
        self._adapter_registry_instance: ReactiveAdapterRegistryPort | None = None
        self._name_inferencer_instance: NameInferencer | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_type_introspector(self) -> TypeIntrospectorPort:
        if self._type_introspector_instance is None:
            self._type_introspector_instance = PythonTypeIntrospector()
        return self._type_introspector_instance

    def create_adapter_registry(self) -> ReactiveAdapterRegistryPort:
        if self._adapter_registry_instance is None:
            self._adapter_registry_instance = get_shared_registry()
        return self._adapter_registry_instance

    def create_name_inferencer(self) -> NameInferencer:
        if self._name_inferencer_instance is None:
            self._name_inferencer_instance = NameInferencer(
                self.create_type_introspector(),
                self.create_adapter_registry(),
                self.create_logger(),
                config=self.config,
            )
        return self._name_inferencer_instance

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._type_introspector_instance = None
        self._adapter_registry_instance = None
        self._name_inferencer_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger
        self._name_inferencer_instance = None

    def override_type_introspector(self, introspector: TypeIntrospectorPort) -> None:
        self._type_introspector_instance = introspector
        self._name_inferencer_instance = None

    def override_adapter_registry(self, registry: ReactiveAdapterRegistryPort) -> None:
        self._adapter_registry_instance = registry
        self._name_inferencer_instance = None


def create_default_container(
    verbose: int = 0,
    use_null_logger: bool = False,
    config: ConventionsConfig | None = None,
) -> DependencyContainer:
    return DependencyContainer(
        verbose=verbose, use_null_logger=use_null_logger, config=config
    )
