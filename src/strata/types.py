"""Shared types for the strata test engine."""

from enum import Enum


class Lifecycle(Enum):
    """Test instance lifecycle policy."""

    PER_TEST = "per_test"  # Fresh instance per test
    PER_CLASS = "per_class"  # One instance shared by every test in the class
