"""Creation of test instances and their raw outcomes."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

from strata.instances.factory import InstanceFactoryContext
from strata.instances.identity import TypeToken

if TYPE_CHECKING:
    from strata.instances.scope import ClassScope
    from strata.instances.selector import FactorySelection


@dataclass(frozen=True, slots=True)
class Success:
    instance: Any


@dataclass(frozen=True, slots=True)
class NullResult:
    pass


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    actual: TypeToken


@dataclass(frozen=True, slots=True)
class Thrown:
    cause: BaseException


InstantiationResult: TypeAlias = Success | NullResult | TypeMismatch | Thrown

Constructor = Callable[[type, Any], Any]


def default_construct(test_class: type, outer_instance: Any | None = None) -> Any:
    """Construct ``test_class``, handing nested classes their outer instance."""
    if outer_instance is not None:
        return test_class(outer_instance)
    return test_class()


class Instantiator:
    """Runs the selected factory, or default construction, for a scope.

    Anything raised while producing the instance is captured in a
    :class:`Thrown` outcome, except interrupts and task cancellation.
    The produced object is validated by type identity, so a look-alike
    class with the same name is a mismatch.
    """

    def __init__(self, construct: Constructor = default_construct) -> None:
        self._construct = construct

    def instantiate(
        self,
        scope: ClassScope,
        selection: FactorySelection,
        outer_instance: Any | None = None,
    ) -> InstantiationResult:
        context = InstanceFactoryContext(
            test_class=scope.test_class,
            outer_instance=outer_instance,
        )
        try:
            if selection.factory is None:
                instance = self._construct(scope.test_class, outer_instance)
            else:
                instance = selection.factory(context)
        except (KeyboardInterrupt, asyncio.CancelledError):
            raise
        except BaseException as exc:
            return Thrown(exc)

        if instance is None:
            return NullResult()

        actual = TypeToken.of(instance)
        if actual != scope.type_token:
            return TypeMismatch(actual)
        return Success(instance)


__all__ = [
    "InstantiationResult",
    "Instantiator",
    "NullResult",
    "Success",
    "Thrown",
    "TypeMismatch",
    "default_construct",
]
