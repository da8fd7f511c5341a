"""Error types and classification of instantiation outcomes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from strata.instances.factory import describe_factory
from strata.instances.identity import describe_pair
from strata.instances.orchestrator import NullResult, Success, Thrown, TypeMismatch
from strata.types import Lifecycle

if TYPE_CHECKING:
    from strata.instances.orchestrator import InstantiationResult
    from strata.instances.scope import ClassScope
    from strata.instances.selector import FactorySelection


class StrataError(Exception):
    """Base class for all strata engine failures."""


class ConfigurationError(StrataError):
    """Raised at scope entry when a test class is misconfigured."""


class ExtensionConfigurationError(ConfigurationError):
    """Raised when more than one instance factory is visible to a scope."""


class HookConfigurationError(ConfigurationError):
    """Raised when a class-level hook cannot run under the scope's lifecycle."""


class TestInstantiationError(StrataError):
    """Raised when a test instance could not be produced.

    The original failure, if any, is kept on ``cause`` and chained as
    ``__cause__`` when raised through :func:`unwrap`.
    """

    __test__ = False

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class Granularity(Enum):
    """Where an instantiation failure is reported."""

    CONTAINER = "container"
    TEST = "test"


def failure_granularity(lifecycle: Lifecycle) -> Granularity:
    """Shared instances are created ahead of all tests, so their failures
    belong to the container; per-test instances fail only their test.
    """
    if lifecycle is Lifecycle.PER_CLASS:
        return Granularity.CONTAINER
    return Granularity.TEST


def _cause_message(cause: BaseException) -> str:
    return str(cause) or type(cause).__name__


def failure_for(
    outcome: InstantiationResult,
    scope: ClassScope,
    selection: FactorySelection,
) -> TestInstantiationError | None:
    """Return the error describing ``outcome``, or ``None`` on success.

    The result depends only on the arguments, so classifying the same
    outcome twice yields equal messages.
    """
    if isinstance(outcome, Success):
        return None

    target = scope.display_name

    if isinstance(outcome, Thrown):
        cause = outcome.cause
        if isinstance(cause, TestInstantiationError):
            return cause
        if selection.factory is None:
            return TestInstantiationError(
                f"Failed to instantiate test class [{target}] using default construction: "
                f"{_cause_message(cause)}",
                cause,
            )
        return TestInstantiationError(
            f"TestInstanceFactory [{describe_factory(selection.factory)}] failed to instantiate "
            f"test class [{target}]: {_cause_message(cause)}",
            cause,
        )

    if isinstance(outcome, NullResult):
        actual = "null"
    elif isinstance(outcome, TypeMismatch):
        target, actual = describe_pair(scope.type_token, outcome.actual)
    else:
        msg = f"Unknown instantiation outcome: {outcome!r}"
        raise TypeError(msg)

    factory = describe_factory(selection.factory) if selection.factory is not None else "default"
    return TestInstantiationError(
        f"TestInstanceFactory [{factory}] failed to return an instance of [{target}] "
        f"and instead returned an instance of [{actual}]."
    )


def unwrap(
    outcome: InstantiationResult,
    scope: ClassScope,
    selection: FactorySelection,
) -> Any:
    """Return the instance held by a successful outcome or raise its error."""
    error = failure_for(outcome, scope, selection)
    if error is None:
        return outcome.instance  # type: ignore[union-attr]
    raise error from error.cause


__all__ = [
    "ConfigurationError",
    "ExtensionConfigurationError",
    "Granularity",
    "HookConfigurationError",
    "StrataError",
    "TestInstantiationError",
    "failure_for",
    "failure_granularity",
    "unwrap",
]
