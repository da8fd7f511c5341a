"""Rich console reporter."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from strata.testing.runner import RunResult, Status, TestNode

_STATUS_STYLE = {
    Status.PASSED: ("✓", "green"),
    Status.FAILED: ("✗", "red"),
    Status.ERROR: ("!", "red"),
}


class ConsoleReporter:
    """Prints a tree of containers and tests as they finish."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console()
        self.verbosity = verbosity
        self._depth = 0
        self._failures: list[TestNode] = []

    async def on_collection_complete(self, nodes: list[TestNode]) -> None:
        total = sum(1 for root in nodes for node in root.walk() if node.is_test)
        if not total:
            self.console.print("[yellow]No tests found.[/yellow]")
            return
        self.console.print(f"Collected {total} test(s)")

    async def on_container_started(self, node: TestNode) -> None:
        if self.verbosity >= 0:
            self.console.print(f"{'  ' * self._depth}[bold]{escape(node.name)}[/bold]")
        self._depth += 1

    async def on_container_finished(self, node: TestNode) -> None:
        self._depth -= 1
        if node.status is Status.FAILED:
            self._failures.append(node)
            self.console.print(
                f"{'  ' * (self._depth + 1)}[red]container failed: {escape(str(node.error))}[/red]"
            )

    async def on_test_started(self, node: TestNode) -> None:
        pass

    async def on_test_finished(self, node: TestNode) -> None:
        symbol, style = _STATUS_STYLE.get(node.status, ("?", "yellow"))
        if node.status is not Status.PASSED:
            self._failures.append(node)
        if self.verbosity < 0 and node.status is Status.PASSED:
            return
        line = f"{'  ' * self._depth}[{style}]{symbol}[/{style}] {escape(node.name)}"
        if self.verbosity > 0:
            line += f" [dim]({node.duration_ms:.1f} ms)[/dim]"
        self.console.print(line)

    async def on_run_complete(self, run_result: RunResult) -> None:
        if self._failures:
            self.console.rule("[red]Failures[/red]")
            for node in self._failures:
                self.console.print(f"[bold]{escape(node.full_name)}[/bold]")
                self.console.print(f"  {type(node.error).__name__}: {escape(str(node.error))}")

        summary = (
            f"{run_result.passed} passed, {run_result.failed} failed, "
            f"{run_result.errors} errors, {run_result.containers_failed} containers failed"
        )
        if run_result.not_run:
            summary += f", {run_result.not_run} not run"
        style = "green" if run_result.ok else "red"
        self.console.print(f"[{style}]{summary}[/{style}]")


__all__ = ["ConsoleReporter"]
