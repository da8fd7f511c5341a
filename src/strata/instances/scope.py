"""Class scope descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from strata.instances.identity import TypeToken
from strata.types import Lifecycle


@dataclass(eq=False)
class ClassScope:
    """One test class as seen by the instance machinery.

    Scopes compare and hash by identity. Factory lists are handed over
    already ordered by the discovery layer: ``inherited_factories`` holds
    mixin declarations first, then superclasses root-to-leaf.

    Attributes
    ----------
    test_class
        Class whose instances the scope produces.
    parent
        Scope of the enclosing class for nested classes.
    lifecycle
        Whether an instance is created per test or shared per class.
    local_factories
        Factories declared directly on ``test_class``.
    inherited_factories
        Factories declared on mixins and superclasses.
    """

    test_class: type
    parent: ClassScope | None = None
    lifecycle: Lifecycle = Lifecycle.PER_TEST
    local_factories: tuple[Any, ...] = field(default_factory=tuple)
    inherited_factories: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.local_factories = tuple(self.local_factories)
        self.inherited_factories = tuple(self.inherited_factories)

    @property
    def type_token(self) -> TypeToken:
        return TypeToken(self.test_class)

    @property
    def display_name(self) -> str:
        return self.type_token.display_name

    def __repr__(self) -> str:
        return f"ClassScope({self.display_name}, lifecycle={self.lifecycle.value})"


__all__ = ["ClassScope"]
