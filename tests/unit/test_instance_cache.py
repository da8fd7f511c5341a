"""Tests for lifecycle-aware instance caching."""

import pytest

from strata import Lifecycle
from strata.instances import (
    ClassScope,
    ExtensionConfigurationError,
    InstanceCache,
    TestInstantiationError,
)


class Counting:
    created = 0

    def __init__(self):
        type(self).created += 1


class CountingNested:
    created = 0

    def __init__(self, outer):
        type(self).created += 1
        self.outer = outer


class CountingInnerNested:
    created = 0

    def __init__(self, outer):
        type(self).created += 1
        self.outer = outer


@pytest.fixture(autouse=True)
def reset_counters():
    for cls in (Counting, CountingNested, CountingInnerNested):
        cls.created = 0


def test_shared_scope_instantiates_once():
    cache = InstanceCache()
    scope = ClassScope(Counting, lifecycle=Lifecycle.PER_CLASS)

    instances = [cache.request(scope) for _ in range(3)]

    assert Counting.created == 1
    assert instances[0] is instances[1] is instances[2]
    assert cache.cached(scope) is instances[0]


def test_fresh_scope_is_never_cached():
    cache = InstanceCache()
    scope = ClassScope(Counting, lifecycle=Lifecycle.PER_TEST)

    first = cache.request(scope)
    second = cache.request(scope)

    assert Counting.created == 2
    assert first is not second
    assert cache.cached(scope) is None


def test_fresh_nested_scopes_rebuild_the_whole_chain():
    cache = InstanceCache()
    outer = ClassScope(Counting)
    middle = ClassScope(CountingNested, parent=outer)
    inner = ClassScope(CountingInnerNested, parent=middle)

    for _ in range(2):
        instance = cache.request(inner)
        assert isinstance(instance.outer, CountingNested)
        assert isinstance(instance.outer.outer, Counting)

    assert Counting.created == 2
    assert CountingNested.created == 2
    assert CountingInnerNested.created == 2


def test_ancestors_are_created_before_descendants():
    order = []

    def factory(context):
        order.append(context.test_class.__name__)
        if context.outer_instance is not None:
            return context.test_class(context.outer_instance)
        return context.test_class()

    cache = InstanceCache()
    outer = ClassScope(Counting, local_factories=(factory,))
    middle = ClassScope(CountingNested, parent=outer)
    inner = ClassScope(CountingInnerNested, parent=middle)

    cache.request(inner)

    assert order == ["Counting", "CountingNested", "CountingInnerNested"]


def test_shared_parent_is_reused_by_fresh_children():
    cache = InstanceCache()
    outer = ClassScope(Counting, lifecycle=Lifecycle.PER_CLASS)
    child = ClassScope(CountingNested, parent=outer)

    first = cache.request(child)
    second = cache.request(child)

    assert Counting.created == 1
    assert CountingNested.created == 2
    assert first.outer is second.outer


def test_release_drops_the_shared_instance():
    cache = InstanceCache()
    scope = ClassScope(Counting, lifecycle=Lifecycle.PER_CLASS)
    first = cache.request(scope)

    cache.release(scope)

    assert cache.cached(scope) is None
    assert cache.request(scope) is not first
    assert Counting.created == 2


def test_release_of_unknown_scope_is_a_no_op():
    InstanceCache().release(ClassScope(Counting))


def test_enter_detects_conflicts_before_instantiation():
    def foo(context):
        return context.test_class()

    def bar(context):
        return context.test_class()

    cache = InstanceCache()
    scope = ClassScope(Counting, local_factories=(foo, bar))

    with pytest.raises(ExtensionConfigurationError):
        cache.enter(scope)
    with pytest.raises(ExtensionConfigurationError):
        cache.request(scope)
    assert Counting.created == 0


def test_parent_failure_short_circuits_child():
    def null_factory(context):
        return None

    cache = InstanceCache()
    outer = ClassScope(Counting, local_factories=(null_factory,))
    child = ClassScope(CountingNested, parent=outer)

    with pytest.raises(TestInstantiationError, match=r"instance of \[.*\.Counting\]"):
        cache.request(child)
    assert CountingNested.created == 0


def test_failed_shared_instantiation_is_not_cached():
    attempts = []

    def flaky(context):
        attempts.append(1)
        raise RuntimeError("boom!")

    cache = InstanceCache()
    scope = ClassScope(Counting, lifecycle=Lifecycle.PER_CLASS, local_factories=(flaky,))

    for _ in range(2):
        with pytest.raises(TestInstantiationError):
            cache.request(scope)

    assert len(attempts) == 2
    assert cache.cached(scope) is None


def test_zero_factories_matches_plain_factory():
    def plain(context):
        return context.test_class()

    default_instance = InstanceCache().request(ClassScope(Counting))
    factory_instance = InstanceCache().request(ClassScope(Counting, local_factories=(plain,)))

    assert type(default_instance) is type(factory_instance)
    assert vars(default_instance) == vars(factory_instance)
