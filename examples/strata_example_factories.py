"""Demonstrates instance factories, lifecycles and nested classes.

Run with: strata test examples/
"""

import strata
from strata import Lifecycle


class Connection:
    """Stand-in for an expensive resource shared by a test class."""

    opened = 0

    def __init__(self):
        type(self).opened += 1
        self.queries: list[str] = []

    def execute(self, query: str) -> str:
        self.queries.append(query)
        return query.upper()


def with_connection(context):
    """Build the test object and hand it a connection."""
    instance = context.test_class()
    instance.connection = Connection()
    return instance


# One factory, one shared instance for every test in the class.
@strata.extend_with(with_connection)
@strata.test_instance(Lifecycle.PER_CLASS)
class StrataSharedConnection:
    connection: Connection

    @strata.before_all
    def reset_log(self):
        self.connection.queries.clear()

    def strata_select(self):
        assert self.connection.execute("select 1") == "SELECT 1"

    def strata_history_is_shared(self):
        assert self.connection.queries == ["select 1"]


# Default per-test lifecycle: every test gets a fresh object.
class StrataFreshState:
    def __init__(self):
        self.items = []

    def strata_append(self):
        self.items.append(1)
        assert self.items == [1]

    def strata_append_again(self):
        self.items.append(2)
        assert self.items == [2]

    @strata.nested
    class Inner:
        """Nested classes receive the enclosing instance."""

        def __init__(self, outer):
            self.outer = outer

        def strata_sees_outer(self):
            assert self.outer.items == []


# Two factories on one class is a configuration error reported for the container.
def first_factory(context):
    return context.test_class()


def second_factory(context):
    return context.test_class()


@strata.extend_with(first_factory, second_factory)
class StrataConflictingFactories:
    def strata_never_runs(self):
        pass
