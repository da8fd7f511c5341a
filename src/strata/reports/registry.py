"""Named reporter registry used by the CLI."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from strata.reports.base import Reporter


T = TypeVar("T")

_reporter_registry: dict[str, type[Any]] = {}
_builtin_registry: dict[str, type[Any]] = {}


def reporter(
    cls: type[T] | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> type[T] | Any:
    """Register a reporter class under its class name or ``name``.

    Usable bare (``@reporter``) or with arguments (``@reporter(name="json")``).
    """

    def decorator(cls: type[T]) -> type[T]:
        if enabled:
            _reporter_registry[name or cls.__name__] = cls
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator


def register_builtin(cls: type[T]) -> type[T]:
    """Register a reporter that survives :func:`clear_reporter_registry`."""
    _reporter_registry[cls.__name__] = cls
    _builtin_registry[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type[Any]]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Drop user registrations, keeping built-ins."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def _import_reporter_class(import_path: str) -> type[Any]:
    """Import ``package.module:ClassName`` or ``package.module.ClassName``."""
    separator = ":" if ":" in import_path else "."
    module_path, _, class_name = import_path.rpartition(separator)
    if not module_path or not class_name:
        msg = f"Invalid import path: {import_path}"
        raise ValueError(msg)

    cls = getattr(importlib.import_module(module_path), class_name)

    from strata.reports.base import Reporter

    if not isinstance(cls, type) or not issubclass(cls, Reporter):
        msg = f"{import_path} does not implement the Reporter protocol"
        raise TypeError(msg)
    return cls


def resolve_reporter(name: str, **kwargs: Any) -> Reporter:
    """Build a reporter from a registry name or an import string.

    Raises:
        ValueError: If ``name`` is neither registered nor importable.
    """
    if name in _reporter_registry:
        return _reporter_registry[name](**kwargs)

    if ":" in name or "." in name:
        return _import_reporter_class(name)(**kwargs)

    available = ", ".join(sorted(_reporter_registry))
    msg = f"Unknown reporter: {name}. Available: {available}"
    raise ValueError(msg)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
) -> list[Reporter]:
    """Build several reporters, passing per-name constructor options."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
