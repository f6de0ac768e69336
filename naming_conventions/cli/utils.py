from collections.abc import Callable
import importlib
from typing import Any

import click


def load_target(target: str) -> Callable[..., Any]:
    """Import ``package.module:Qualified.name`` and return the callable."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise click.BadParameter(
            f"expected 'module:qualname', got {target!r}", param_hint="TARGET"
        )
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(
            f"cannot import module {module_name!r}: {exc}", param_hint="TARGET"
        ) from exc
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {qualname!r}", param_hint="TARGET"
            ) from exc
    if not callable(obj):
        raise click.BadParameter(f"{target!r} is not callable", param_hint="TARGET")
    return obj
