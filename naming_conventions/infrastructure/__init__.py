"""Infrastructure layer for naming conventions.

This layer contains the adapters behind the application ports: Python type
introspection, the async wrapper registry, dynamic proxies and logging.
"""

from .container import DependencyContainer, create_default_container

__all__ = [
    "DependencyContainer",
    "create_default_container",
]
