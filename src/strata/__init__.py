"""Strata - class-based test engine with pluggable test instance factories."""

from .instances import (
    ClassScope,
    ExtensionConfigurationError,
    InstanceCache,
    InstanceFactory,
    InstanceFactoryContext,
    StrataError,
    TestInstantiationError,
)
from .testing import (
    Runner,
    after_all,
    after_each,
    before_all,
    before_each,
    collect,
    extend_with,
    nested,
    register_extension,
    run_classes,
    test_instance,
)
from .types import Lifecycle
from .version import __version__


__all__ = [
    # Registration
    "extend_with",
    "register_extension",
    "test_instance",
    "nested",
    "before_all",
    "after_all",
    "before_each",
    "after_each",
    "Lifecycle",
    # Execution
    "collect",
    "run_classes",
    "Runner",
    # Instances
    "ClassScope",
    "InstanceCache",
    "InstanceFactory",
    "InstanceFactoryContext",
    # Errors
    "StrataError",
    "ExtensionConfigurationError",
    "TestInstantiationError",
]
