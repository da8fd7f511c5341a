"""Resolution of the factories visible to a scope."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from strata.instances.scope import ClassScope


def _unique(factories: Iterable[Any]) -> tuple[Any, ...]:
    seen: set[int] = set()
    unique: list[Any] = []
    for factory in factories:
        if id(factory) in seen:
            continue
        seen.add(id(factory))
        unique.append(factory)
    return tuple(unique)


def resolve_factories(scope: ClassScope) -> tuple[Any, ...]:
    """Return every factory visible to ``scope`` in resolution order.

    Order: mixin and superclass declarations, the scope's own declarations,
    then the enclosing scope's resolved set. A factory reachable through
    several paths appears once, at its first position.
    """
    chain: list[Any] = [*scope.inherited_factories, *scope.local_factories]
    if scope.parent is not None:
        chain.extend(resolve_factories(scope.parent))
    return _unique(chain)


__all__ = ["resolve_factories"]
