from collections import Counter

import pytest

from assemblage.definitions import normalize_definitions
from assemblage.descriptors import contribution_of, using_deps
from assemblage.extensions import ExtensionSlot, contributes
from assemblage.manifest import ManifestBuilder
from assemblage.unit_builder import UnitBuilder


@pytest.fixture
def calls():
    return Counter()


def build(entries):
    manifest = ManifestBuilder().build(normalize_definitions(entries))
    return UnitBuilder().build(manifest)


def instances(units):
    return {unit.name: unit.instance for unit in units}


def receive(plugins):
    return plugins


def test_dependencies_are_passed_as_keyword_arguments():
    units = build(
        [
            ("lhs", 40),
            ("rhs", lambda: 2),
            ("sum", using_deps({"x": "lhs", "y": "rhs"}, lambda x, y: x + y)),
        ]
    )

    assert instances(units) == {"lhs": 40, "rhs": 2, "sum": 42}


def test_units_are_returned_in_build_order():
    units = build([("b", using_deps(["a"], lambda a: a)), ("a", 1)])

    assert [unit.name for unit in units] == ["a", "b"]
    assert units[1].definition.dependencies


def test_each_factory_runs_exactly_once(calls):
    def counted(name, value):
        def factory(**_):
            calls[name] += 1
            return value

        return factory

    build(
        [
            ("shared", counted("shared", object())),
            ("left", using_deps(["shared"], counted("left", 1))),
            ("right", using_deps(["shared"], counted("right", 2))),
            ("top", using_deps(["left", "right", "shared"], counted("top", 3))),
        ]
    )

    assert calls == {"shared": 1, "left": 1, "right": 1, "top": 1}


def test_shared_dependency_is_the_same_instance():
    units = instances(
        build(
            [
                ("shared", object),
                ("left", using_deps(["shared"], lambda shared: shared)),
                ("right", using_deps(["shared"], lambda shared: shared)),
            ]
        )
    )

    assert units["left"] is units["right"] is units["shared"]


def test_contributions_are_collected_from_every_unit_in_declaration_order():
    slot = ExtensionSlot("plugins")

    @contributes(slot, "first")
    def make_first():
        return 1

    def make_silent():
        return 2

    @contributes(slot, "second")
    def make_second(first):
        return first + 1

    units = instances(
        build(
            [
                ("host", using_deps({"plugins": contribution_of(slot)}, receive)),
                ("second", using_deps(["first"], make_second)),
                ("silent", make_silent),
                ("first", make_first),
            ]
        )
    )

    assert units["host"] == ["second", "first"]


def test_contributions_are_collected_afresh_for_every_request():
    slot = ExtensionSlot("plugins")

    @contributes(slot, "plugin")
    def make_plugin():
        return None

    units = instances(
        build(
            [
                ("plugin", make_plugin),
                ("a", using_deps({"plugins": contribution_of(slot)}, receive)),
                ("b", using_deps({"plugins": contribution_of(slot)}, receive)),
            ]
        )
    )

    assert units["a"] == units["b"] == ["plugin"]
    assert units["a"] is not units["b"]


def test_factory_errors_propagate():
    def broken():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        build([("broken", broken)])


def test_contributions_are_not_inherited_by_subclasses_or_instances():
    slot = ExtensionSlot("plugins")

    @contributes(slot, "base")
    class BasePlugin:
        pass

    class OtherPlugin(BasePlugin):
        pass

    host = ("host", using_deps({"plugins": contribution_of(slot)}, receive))

    with_subclass = instances(
        build([("base", BasePlugin), ("other", OtherPlugin), host])
    )
    with_instance = instances(build([("plugin", BasePlugin()), host]))

    assert with_subclass["host"] == ["base"]
    assert with_instance["host"] == []
