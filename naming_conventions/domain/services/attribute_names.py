from ...constants import Defaults, Derivations
from ..exceptions import InvalidArgumentError


def attribute_name_to_property_name(
    attribute_name: str, *, separator: str = Defaults.ATTRIBUTE_SEPARATOR
) -> str:
    """Convert an attribute name (``transaction-manager``) to camel case.

    Each separator is dropped and the character after it is upper-cased; a
    trailing separator contributes nothing.
    """
    if attribute_name is None:
        raise InvalidArgumentError(
            "'attribute_name' must not be None",
            derivation=Derivations.ATTRIBUTE,
            subject=attribute_name,
        )
    if separator not in attribute_name:
        return attribute_name
    chars: list[str] = []
    upper_case_next = False
    for char in attribute_name:
        if char == separator:
            upper_case_next = True
        elif upper_case_next:
            chars.append(char.upper())
            upper_case_next = False
        else:
            chars.append(char)
    return "".join(chars)


def qualified_attribute_name(
    scope: str | type,
    attribute_name: str,
    *,
    separator: str = Defaults.QUALIFIER_SEPARATOR,
) -> str:
    if scope is None:
        raise InvalidArgumentError(
            "'scope' must not be None",
            derivation=Derivations.QUALIFIED_NAME,
            subject=scope,
        )
    if attribute_name is None:
        raise InvalidArgumentError(
            "'attribute_name' must not be None",
            derivation=Derivations.QUALIFIED_NAME,
            subject=scope,
        )
    if isinstance(scope, type):
        scope = f"{scope.__module__}.{scope.__qualname__}"
    return f"{scope}{separator}{attribute_name}"
