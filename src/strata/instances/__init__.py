"""Test instance resolution, creation and lifecycle management."""

from .cache import InstanceCache
from .errors import (
    ConfigurationError,
    ExtensionConfigurationError,
    Granularity,
    HookConfigurationError,
    StrataError,
    TestInstantiationError,
    failure_for,
    failure_granularity,
    unwrap,
)
from .factory import InstanceFactory, InstanceFactoryContext, describe_factory
from .identity import TypeToken, describe_pair
from .orchestrator import (
    InstantiationResult,
    Instantiator,
    NullResult,
    Success,
    Thrown,
    TypeMismatch,
    default_construct,
)
from .resolver import resolve_factories
from .scope import ClassScope
from .selector import FactorySelection, select_factory


__all__ = [
    "ClassScope",
    "ConfigurationError",
    "ExtensionConfigurationError",
    "FactorySelection",
    "Granularity",
    "HookConfigurationError",
    "InstanceCache",
    "InstanceFactory",
    "InstanceFactoryContext",
    "InstantiationResult",
    "Instantiator",
    "NullResult",
    "StrataError",
    "Success",
    "TestInstantiationError",
    "Thrown",
    "TypeMismatch",
    "TypeToken",
    "default_construct",
    "describe_factory",
    "describe_pair",
    "failure_for",
    "failure_granularity",
    "resolve_factories",
    "select_factory",
    "unwrap",
]
