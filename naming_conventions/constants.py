from typing import ClassVar


class Defaults:
    PLURAL_SUFFIX = "List"
    SYNTHETIC_SEPARATOR = "$"
    ATTRIBUTE_SEPARATOR = "-"
    QUALIFIER_SEPARATOR = "."
    CONFIG_FILE = "naming_conventions.toml"
    PROXY_CLASS_PREFIX = "$Proxy"


class LanguageInterfaces:
    MODULES: ClassVar[frozenset[str]] = frozenset(
        {
            "builtins",
            "abc",
            "collections.abc",
            "_collections_abc",
            "typing",
            "numbers",
            "contextlib",
            "os",
            "io",
            "_io",
        }
    )


class Typecodes:
    INTEGER: ClassVar[frozenset[str]] = frozenset("bBhHiIlLqQ")
    FLOAT: ClassVar[frozenset[str]] = frozenset("fd")
    TEXT: ClassVar[frozenset[str]] = frozenset("uw")


class Derivations:
    VALUE = "value"
    PARAMETER = "parameter"
    RETURN = "return"
    PEEK = "peek"
    ATTRIBUTE = "attribute"
    QUALIFIED_NAME = "qualified-name"
