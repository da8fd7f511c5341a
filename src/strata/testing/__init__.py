"""Class-based test execution.

Provides registration decorators, discovery and the runner.
"""

from .discovery import build_scope, collect, collect_class
from .markers import (
    after_all,
    after_each,
    before_all,
    before_each,
    extend_with,
    nested,
    register_extension,
    test_instance,
)
from .runner import RunResult, Runner, Status, TestNode, run_classes


__all__ = [
    "RunResult",
    "Runner",
    "Status",
    "TestNode",
    "after_all",
    "after_each",
    "before_all",
    "before_each",
    "build_scope",
    "collect",
    "collect_class",
    "extend_with",
    "nested",
    "register_extension",
    "run_classes",
    "test_instance",
]
