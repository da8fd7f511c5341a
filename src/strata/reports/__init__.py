"""Reporting module for strata test output."""

from strata.reports.base import Reporter
from strata.reports.console import ConsoleReporter
from strata.reports.recorder import EventKind, ExecutionEvent, ExecutionRecorder
from strata.reports.registry import (
    clear_reporter_registry,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)
register_builtin(ExecutionRecorder)

__all__ = [
    "ConsoleReporter",
    "EventKind",
    "ExecutionEvent",
    "ExecutionRecorder",
    "Reporter",
    "clear_reporter_registry",
    "get_reporter_registry",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
