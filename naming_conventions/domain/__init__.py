"""Domain layer.

Pure naming logic with no dependencies on infrastructure or the CLI.
"""

from .exceptions import IllegalStateError, InvalidArgumentError, NamingConventionError

__all__ = [
    "IllegalStateError",
    "InvalidArgumentError",
    "NamingConventionError",
]
