"""Type identity tokens.

Two classes may print the same ``module.QualName`` while being distinct
objects, for example after a module is reloaded or when a class is rebuilt
dynamically. A :class:`TypeToken` compares by class reference only, so such
look-alikes never match.
"""

from __future__ import annotations

from typing import Any


class TypeToken:
    """Opaque, comparable identity of a class."""

    __slots__ = ("_cls",)

    def __init__(self, cls: type) -> None:
        self._cls = cls

    @classmethod
    def of(cls, obj: Any) -> TypeToken:
        """Return the token of ``obj``'s runtime type."""
        return cls(type(obj))

    @property
    def cls(self) -> type:
        return self._cls

    @property
    def display_name(self) -> str:
        module = getattr(self._cls, "__module__", None)
        qualname = getattr(self._cls, "__qualname__", self._cls.__name__)
        if not module or module == "builtins":
            return qualname
        return f"{module}.{qualname}"

    def describe(self, *, disambiguate: bool = False) -> str:
        if disambiguate:
            return f"{self.display_name}@{id(self._cls):x}"
        return self.display_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeToken):
            return NotImplemented
        return self._cls is other._cls

    def __hash__(self) -> int:
        return id(self._cls)

    def __repr__(self) -> str:
        return f"TypeToken({self.describe(disambiguate=True)})"


def describe_pair(expected: TypeToken, actual: TypeToken) -> tuple[str, str]:
    """Return display strings for two tokens.

    Both strings carry an identity marker when the tokens differ but share a
    display name; otherwise the plain names are returned.
    """
    ambiguous = expected != actual and expected.display_name == actual.display_name
    return (
        expected.describe(disambiguate=ambiguous),
        actual.describe(disambiguate=ambiguous),
    )


__all__ = ["TypeToken", "describe_pair"]
