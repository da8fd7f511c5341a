"""Lifecycle-aware storage of test instances."""

from __future__ import annotations

import logging
from typing import Any

from strata.instances.errors import unwrap
from strata.instances.orchestrator import Instantiator
from strata.instances.resolver import resolve_factories
from strata.instances.scope import ClassScope
from strata.instances.selector import FactorySelection, select_factory
from strata.types import Lifecycle

logger = logging.getLogger(__name__)


class InstanceCache:
    """Hands out test instances according to each scope's lifecycle.

    ``PER_CLASS`` scopes get one instance, created on first request and kept
    until :meth:`release`. ``PER_TEST`` scopes are never cached: every
    request builds a new instance, including new instances for the whole
    chain of enclosing ``PER_TEST`` scopes.
    """

    def __init__(self, instantiator: Instantiator | None = None) -> None:
        self._instantiator = instantiator or Instantiator()
        self._selections: dict[ClassScope, FactorySelection] = {}
        self._instances: dict[ClassScope, Any] = {}

    def enter(self, scope: ClassScope) -> FactorySelection:
        """Resolve and select the factory for ``scope``.

        Raises:
            ExtensionConfigurationError: If more than one factory is visible.
        """
        selection = self._selections.get(scope)
        if selection is None:
            selection = select_factory(scope, resolve_factories(scope))
            self._selections[scope] = selection
        return selection

    def request(self, scope: ClassScope) -> Any:
        """Return an instance for ``scope``, creating enclosing instances first.

        Raises:
            ExtensionConfigurationError: If the scope or an ancestor has
                conflicting factories.
            TestInstantiationError: If the scope or an ancestor could not be
                instantiated.
        """
        if scope in self._instances:
            return self._instances[scope]

        selection = self.enter(scope)
        outer_instance = self.request(scope.parent) if scope.parent is not None else None

        outcome = self._instantiator.instantiate(scope, selection, outer_instance)
        instance = unwrap(outcome, scope, selection)
        logger.debug("Instantiated %s (%s)", scope.display_name, scope.lifecycle.value)

        if scope.lifecycle is Lifecycle.PER_CLASS:
            self._instances[scope] = instance
        return instance

    def cached(self, scope: ClassScope) -> Any | None:
        return self._instances.get(scope)

    def release(self, scope: ClassScope) -> None:
        """Forget everything held for ``scope``."""
        if self._instances.pop(scope, None) is not None:
            logger.debug("Released shared instance of %s", scope.display_name)
        self._selections.pop(scope, None)


__all__ = ["InstanceCache"]
