"""Reporter that records execution events for later inspection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from strata.testing.runner import RunResult, Status, TestNode


class EventKind(Enum):
    CONTAINER_STARTED = "container_started"
    CONTAINER_FINISHED = "container_finished"
    TEST_STARTED = "test_started"
    TEST_FINISHED = "test_finished"


@dataclass(frozen=True)
class ExecutionEvent:
    """A single reported event.

    ``status`` and ``error`` are snapshots taken when the event fired.
    """

    kind: EventKind
    node: TestNode
    status: Status
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is Status.PASSED

    def describe(self) -> str:
        label = "test" if self.node.is_test else "container"
        return f"{self.kind.value}:{label}:{self.node.name}"


class ExecutionRecorder:
    """Keeps every event of a run in order."""

    def __init__(self) -> None:
        self.events: list[ExecutionEvent] = []
        self.run_result: RunResult | None = None

    def _record(self, kind: EventKind, node: TestNode) -> None:
        self.events.append(ExecutionEvent(kind=kind, node=node, status=node.status, error=node.error))

    async def on_collection_complete(self, nodes: list[TestNode]) -> None:
        self.events.clear()

    async def on_container_started(self, node: TestNode) -> None:
        self._record(EventKind.CONTAINER_STARTED, node)

    async def on_container_finished(self, node: TestNode) -> None:
        self._record(EventKind.CONTAINER_FINISHED, node)

    async def on_test_started(self, node: TestNode) -> None:
        self._record(EventKind.TEST_STARTED, node)

    async def on_test_finished(self, node: TestNode) -> None:
        self._record(EventKind.TEST_FINISHED, node)

    async def on_run_complete(self, run_result: RunResult) -> None:
        self.run_result = run_result

    def of_kind(self, kind: EventKind) -> Iterator[ExecutionEvent]:
        return (event for event in self.events if event.kind is kind)

    @property
    def tests_started(self) -> int:
        return sum(1 for _ in self.of_kind(EventKind.TEST_STARTED))

    @property
    def tests_succeeded(self) -> int:
        return sum(1 for event in self.of_kind(EventKind.TEST_FINISHED) if event.succeeded)

    @property
    def tests_failed(self) -> int:
        return sum(1 for event in self.of_kind(EventKind.TEST_FINISHED) if not event.succeeded)

    @property
    def containers_failed(self) -> int:
        return sum(1 for event in self.of_kind(EventKind.CONTAINER_FINISHED) if not event.succeeded)

    def failures(self) -> list[ExecutionEvent]:
        """Return finished events, tests and containers, that did not pass."""
        return [
            event
            for event in self.events
            if event.kind in (EventKind.CONTAINER_FINISHED, EventKind.TEST_FINISHED)
            and not event.succeeded
        ]

    def sequence(self) -> list[str]:
        return [event.describe() for event in self.events]


__all__ = ["EventKind", "ExecutionEvent", "ExecutionRecorder"]
