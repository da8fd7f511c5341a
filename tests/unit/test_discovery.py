"""Tests for registration markers and class discovery."""

import textwrap

import pytest

from strata import Lifecycle
from strata.testing import build_scope, collect, collect_class, extend_with, nested, test_instance
from strata.testing.markers import get_extension_data, get_lifecycle


class AlphaFactory:
    def __call__(self, context):
        return context.test_class()


def beta_factory(context):
    return context.test_class()


def gamma_factory(context):
    return context.test_class()


@extend_with(beta_factory)
class Mixin:
    pass


@extend_with(AlphaFactory)
class Root:
    pass


@extend_with(gamma_factory)
class Middle(Root):
    pass


class Leaf(Middle, Mixin):
    pass


@test_instance(Lifecycle.PER_CLASS)
class SharedBase:
    pass


class SharedChild(SharedBase):
    pass


class Container:
    def strata_first(self):
        pass

    def helper(self):
        pass

    def strata_second(self):
        pass

    @nested
    class Inner:
        def __init__(self, outer):
            self.outer = outer

        def strata_inner(self):
            pass

    class NotNested:
        def strata_ignored(self):
            pass


class TestMarkers:
    def test_factory_class_maps_to_one_shared_object(self):
        @extend_with(AlphaFactory)
        class Other:
            pass

        [from_root] = get_extension_data(Root).factories
        [from_other] = get_extension_data(Other).factories
        assert from_root is from_other
        assert isinstance(from_root, AlphaFactory)

    def test_declarations_are_not_inherited_as_local(self):
        assert get_extension_data(Leaf).factories == []

    def test_non_callable_extension_is_rejected(self):
        with pytest.raises(TypeError, match="must be callable"):
            extend_with(42)

    def test_lifecycle_is_inherited(self):
        assert get_lifecycle(SharedChild) is Lifecycle.PER_CLASS
        assert get_lifecycle(Root) is None

    def test_lifecycle_accepts_strings(self):
        @test_instance("per_class")
        class Declared:
            pass

        assert get_lifecycle(Declared) is Lifecycle.PER_CLASS


class TestBuildScope:
    def test_mixins_then_superclasses_then_local(self):
        scope = build_scope(Leaf)

        alpha = get_extension_data(Root).factories[0]
        assert scope.inherited_factories == (beta_factory, alpha, gamma_factory)
        assert scope.local_factories == ()

    def test_first_base_chain_is_the_superclass_line(self):
        scope = build_scope(Middle)

        assert scope.local_factories == (gamma_factory,)
        assert scope.inherited_factories == (get_extension_data(Root).factories[0],)

    def test_default_lifecycle_applies_when_undeclared(self):
        assert build_scope(Root).lifecycle is Lifecycle.PER_TEST
        assert build_scope(Root, default_lifecycle=Lifecycle.PER_CLASS).lifecycle is Lifecycle.PER_CLASS
        assert build_scope(SharedChild).lifecycle is Lifecycle.PER_CLASS


class TestCollectClass:
    def test_tests_then_nested_containers(self):
        node = collect_class(Container)

        assert [child.name for child in node.children] == ["strata_first", "strata_second", "Inner"]
        inner = node.children[2]
        assert not inner.is_test
        assert inner.scope.parent is node.scope
        assert [child.name for child in inner.children] == ["strata_inner"]

    def test_full_names_follow_nesting(self):
        node = collect_class(Container)

        inner_test = node.children[2].children[0]
        assert inner_test.full_name == "test_discovery::Container::Inner::strata_inner"

    def test_leaves_share_their_class_scope(self):
        node = collect_class(Container)

        assert node.children[0].scope is node.scope
        assert node.children[0].method_name == "strata_first"


def test_collect_loads_strata_modules(tmp_path):
    source = textwrap.dedent(
        """
        import strata


        @strata.test_instance(strata.Lifecycle.PER_CLASS)
        class StrataSample:
            def strata_works(self):
                assert True


        class Helper:
            def strata_not_collected(self):
                pass
        """
    )
    (tmp_path / "strata_sample.py").write_text(source)
    (tmp_path / "other.py").write_text(source)

    [module_node] = collect(tmp_path)

    assert module_node.name == "strata_sample"
    [class_node] = module_node.children
    assert class_node.name == "StrataSample"
    assert class_node.scope.lifecycle is Lifecycle.PER_CLASS
    assert [child.name for child in class_node.children] == ["strata_works"]


def test_collect_missing_path_finds_nothing(tmp_path):
    assert collect(tmp_path / "missing") == []


def test_same_named_files_in_different_directories_stay_distinct(tmp_path):
    for package in ("alpha", "beta"):
        (tmp_path / package).mkdir()
        (tmp_path / package / "strata_same.py").write_text(
            textwrap.dedent(
                f"""
                class Strata{package.title()}:
                    def strata_runs(self):
                        pass
                """
            )
        )

    alpha, beta = collect(tmp_path)

    assert alpha.full_name == "alpha/strata_same"
    assert beta.full_name == "beta/strata_same"
    [alpha_class] = alpha.children
    [beta_class] = beta.children
    assert alpha_class.full_name == "alpha/strata_same::StrataAlpha"
    assert beta_class.children[0].full_name == "beta/strata_same::StrataBeta::strata_runs"
    assert alpha_class.scope.test_class.__module__ == "strata_tests.alpha.strata_same"
    assert beta_class.scope.test_class.__module__ == "strata_tests.beta.strata_same"
