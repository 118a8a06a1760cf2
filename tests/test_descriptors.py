import pytest

from assemblage.descriptors import using_deps, after, contribution_of
from assemblage.domain import ContributionRequest, Reference, UnitDescriptor
from assemblage.errors import InvalidArgument
from assemblage.extensions import ExtensionSlot


def make_service(**dependencies):
    return dependencies


def test_list_of_names_binds_each_unit_under_its_own_name():
    descriptor = using_deps(["db", "cache"], make_service)

    assert descriptor == UnitDescriptor(
        make_service, {"db": Reference("db"), "cache": Reference("cache")}
    )


def test_mapping_binds_local_names_to_unit_names():
    descriptor = using_deps({"primary": "db"}, make_service)

    assert descriptor.dependencies == {"primary": Reference("db")}


def test_mapping_accepts_contribution_requests():
    slot = ExtensionSlot("routes")

    descriptor = using_deps(
        {"db": "db", "routes": contribution_of(slot)}, make_service
    )

    assert descriptor.dependencies == {
        "db": Reference("db"),
        "routes": ContributionRequest(slot),
    }


def test_after_is_an_alias_of_using_deps():
    assert after(("migrations",), make_service) == using_deps(
        ["migrations"], make_service
    )


@pytest.mark.parametrize("deps", ["db", 42, None, {"db"}])
def test_rejects_dependencies_which_are_neither_sequence_nor_mapping(deps):
    with pytest.raises(InvalidArgument, match="dependency map"):
        using_deps(deps, make_service)


def test_rejects_non_string_unit_names():
    with pytest.raises(InvalidArgument, match="must name a unit with a string"):
        using_deps({"db": 42}, make_service)


def test_rejects_non_callable_factory():
    with pytest.raises(InvalidArgument, match="must be callable"):
        using_deps(["db"], "not a factory")


def test_contribution_of_requires_an_extension_slot():
    with pytest.raises(InvalidArgument, match="extension slot"):
        contribution_of("routes")


def test_contribution_of_wraps_the_slot():
    slot = ExtensionSlot("routes")

    assert contribution_of(slot) == ContributionRequest(slot)
