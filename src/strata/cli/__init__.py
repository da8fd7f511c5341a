"""CLI module for the strata test runner."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from strata.config import StrataConfig, load_config
from strata.reports import Reporter, resolve_reporter
from strata.testing import Runner, TestNode, collect
from strata.types import Lifecycle


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for strata CLI."""
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.command == "test":
        config = load_config()
        raise SystemExit(asyncio.run(_run_tests(args, config)))

    parser.print_help()
    raise SystemExit(0)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strata", description="Strata test engine")
    subparsers = parser.add_subparsers(dest="command")

    test_parser = subparsers.add_parser("test", help="Run strata tests")
    test_parser.add_argument("paths", nargs="*", help="Test files or directories")
    test_parser.add_argument(
        "--lifecycle",
        choices=[lifecycle.value for lifecycle in Lifecycle],
        help="Default test instance lifecycle for classes that do not declare one",
    )
    test_parser.add_argument(
        "-r",
        "--reporter",
        dest="reporters",
        action="append",
        help="Reporter name or import path (repeatable)",
    )
    test_parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    test_parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    return parser


def _resolve_paths(args: argparse.Namespace, config: StrataConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.test_paths


def _resolve_lifecycle(args: argparse.Namespace, config: StrataConfig) -> Lifecycle:
    if args.lifecycle:
        return Lifecycle(args.lifecycle)
    return config.default_lifecycle


def _resolve_verbosity(args: argparse.Namespace, config: StrataConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_reporters(args: argparse.Namespace, config: StrataConfig) -> list[Reporter]:
    names = args.reporters or config.reporters
    verbosity = _resolve_verbosity(args, config)
    reporters: list[Reporter] = []
    for name in names:
        kwargs = {"verbosity": verbosity} if name == "ConsoleReporter" else {}
        reporters.append(resolve_reporter(name, **kwargs))
    return reporters


def _collect_nodes(paths: Sequence[str], lifecycle: Lifecycle) -> list[TestNode]:
    nodes: list[TestNode] = []
    for path in paths:
        nodes.extend(collect(path, default_lifecycle=lifecycle))
    return nodes


async def _run_tests(args: argparse.Namespace, config: StrataConfig) -> int:
    try:
        reporters = _resolve_reporters(args, config)
    except (ValueError, TypeError, ImportError) as exc:
        Console().print(f"[red]{escape(str(exc))}[/red]")
        return 2

    nodes = _collect_nodes(_resolve_paths(args, config), _resolve_lifecycle(args, config))
    result = await Runner(reporters=reporters).run(nodes)
    return 0 if result.ok else 1


__all__ = ["main"]
