"""Application layer.

Holds the port protocols the naming core depends on.
"""

__all__ = []
