"""Shared fixtures for unit tests."""

import pytest

from strata.reports import ExecutionRecorder
from strata.reports.registry import clear_reporter_registry


@pytest.fixture
def recorder() -> ExecutionRecorder:
    """Provide a reporter that keeps every execution event."""
    return ExecutionRecorder()


@pytest.fixture
def clean_registry():
    """Clear the reporter registry before and after each test."""
    clear_reporter_registry()
    yield
    clear_reporter_registry()


@pytest.fixture(autouse=True)
def no_lifecycle_override(monkeypatch):
    monkeypatch.delenv("STRATA_DEFAULT_LIFECYCLE", raising=False)
