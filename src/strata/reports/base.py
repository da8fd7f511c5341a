"""Base reporter protocol for strata test output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from strata.testing.runner import RunResult, TestNode


@runtime_checkable
class Reporter(Protocol):
    """Protocol defining the interface for test reporters.

    All methods are async to support I/O-bound reporters (web dashboard, file output, etc.).
    Sync reporters can implement these as regular methods that don't await anything.
    """

    async def on_collection_complete(self, nodes: list[TestNode]) -> None:
        """Called before execution with the collected root nodes."""
        ...

    async def on_container_started(self, node: TestNode) -> None:
        """Called when a module or class container starts."""
        ...

    async def on_container_finished(self, node: TestNode) -> None:
        """Called when a container finishes, successfully or not."""
        ...

    async def on_test_started(self, node: TestNode) -> None:
        """Called before a test requests its instance."""
        ...

    async def on_test_finished(self, node: TestNode) -> None:
        """Called after each test completes."""
        ...

    async def on_run_complete(self, run_result: RunResult) -> None:
        """Called after all tests complete."""
        ...
