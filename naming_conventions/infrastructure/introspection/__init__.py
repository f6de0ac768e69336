from .python_type_introspector import PythonTypeIntrospector, decapitalize

__all__ = ["PythonTypeIntrospector", "decapitalize"]
