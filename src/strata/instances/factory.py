"""Test instance factory contract."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Generic, Protocol, runtime_checkable

from typing_extensions import TypeVar

from strata.instances.identity import TypeToken

InstanceT = TypeVar("InstanceT", default=Any)


@dataclass(frozen=True, slots=True)
class InstanceFactoryContext(Generic[InstanceT]):
    """What a factory is told about the instance it must produce.

    Attributes
    ----------
    test_class
        Class the produced object must be an exact instance of.
    outer_instance
        Already created instance of the enclosing scope, ``None`` for
        top-level classes.
    """

    test_class: type[InstanceT]
    outer_instance: Any | None = None

    @property
    def type_token(self) -> TypeToken:
        return TypeToken(self.test_class)


@runtime_checkable
class InstanceFactory(Protocol):
    """All callables used as test instance factories conform to this protocol.

    Plain functions, lambdas and objects implementing ``__call__`` are all
    valid factories.
    """

    def __call__(self, context: InstanceFactoryContext) -> Any: ...


def describe_factory(factory: Any) -> str:
    """Return the qualified name used to identify a factory in messages."""
    target = factory if inspect.isroutine(factory) or inspect.isclass(factory) else type(factory)
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None) or repr(target)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


__all__ = ["InstanceFactory", "InstanceFactoryContext", "describe_factory"]
