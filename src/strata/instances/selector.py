"""Selection of the single instance factory for a scope."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from strata.instances.errors import ExtensionConfigurationError
from strata.instances.factory import describe_factory
from strata.instances.resolver import resolve_factories
from strata.instances.scope import ClassScope

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FactorySelection:
    """Outcome of factory selection for one scope.

    ``factory`` is ``None`` when no factory is visible and the scope falls
    back to default construction.
    """

    factory: Any | None
    resolved: tuple[Any, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.factory is None


def select_factory(
    scope: ClassScope,
    resolved: tuple[Any, ...] | None = None,
) -> FactorySelection:
    """Pick the factory that creates instances for ``scope``.

    Factories are aggregated over the whole ancestor chain, so a subclass or
    nested class declaring its own factory next to an inherited one is a
    conflict rather than an override.

    Raises:
        ExtensionConfigurationError: If more than one factory is visible.
    """
    if resolved is None:
        resolved = resolve_factories(scope)

    if len(resolved) > 1:
        names = ", ".join(describe_factory(factory) for factory in resolved)
        msg = (
            f"The following TestInstanceFactory extensions were registered for test class "
            f"[{scope.display_name}], but only one is permitted: [{names}]"
        )
        raise ExtensionConfigurationError(msg)

    if not resolved:
        logger.debug("Using default construction for %s", scope.display_name)
        return FactorySelection(factory=None, resolved=())

    logger.debug(
        "Using TestInstanceFactory %s for %s",
        describe_factory(resolved[0]),
        scope.display_name,
    )
    return FactorySelection(factory=resolved[0], resolved=resolved)


__all__ = ["FactorySelection", "select_factory"]
