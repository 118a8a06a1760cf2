"""Builders for unit descriptors and the dependencies they declare."""

from collections.abc import Mapping
from typing import Any, Callable, Union

from assemblage.domain import (
    ContributionRequest,
    DependencyDescriptor,
    Reference,
    UnitDescriptor,
)
from assemblage.errors import InvalidArgument
from assemblage.extensions import ExtensionSlot, slot_id

__all__ = ["using_deps", "after", "contribution_of"]


DependencySpec = Union[list[str], tuple[str, ...], Mapping[str, Any]]
"""Either a sequence of unit names, or a mapping of local names to unit names.

Example:
    >>> using_deps(["db"], make_service)                  # db=<instance of db>
    >>> using_deps({"primary": "db"}, make_service)       # primary=<instance of db>
    >>> using_deps({"routes": contribution_of(ROUTES)}, make_router)
"""


def using_deps(deps: DependencySpec, factory: Callable[..., Any]) -> UnitDescriptor:
    """Declare a unit whose factory depends on other units.

    Args:
        deps: A list or tuple of unit names, each injected under its own name, or a
            mapping from local names to unit names. Mapping values may also be a
            :class:`Reference` or a :class:`ContributionRequest`.
        factory: Called with the resolved dependencies as keyword arguments.

    Returns:
        A :class:`UnitDescriptor` to be bound to a name in a system definition.

    Raises:
        InvalidArgument: If ``deps`` is neither a sequence nor a mapping, names a unit
            with something other than a string, or ``factory`` is not callable.
    """
    if isinstance(deps, (list, tuple)):
        dependencies = {
            _unit_name(name, name): Reference(name) for name in deps
        }
    elif isinstance(deps, Mapping):
        dependencies = {
            _unit_name(local_name, local_name): _descriptor(local_name, target)
            for local_name, target in deps.items()
        }
    else:
        raise InvalidArgument("You must provide a dependency map (mapping or list)")

    if not callable(factory):
        raise InvalidArgument(f"The unit factory {factory!r} must be callable")

    return UnitDescriptor(factory, dependencies)


# Reads better when a unit only needs other units to have been built first.
after = using_deps


def contribution_of(slot: ExtensionSlot) -> ContributionRequest:
    """Declare a dependency on every contribution made to ``slot``.

    Raises:
        InvalidArgument: If ``slot`` is not an extension slot.
    """
    if slot_id(slot) is None:
        raise InvalidArgument(
            "You must provide an extension slot for which the contributions "
            "ought to be collected"
        )
    return ContributionRequest(slot)


def _descriptor(local_name: str, target: Any) -> DependencyDescriptor:
    if isinstance(target, (Reference, ContributionRequest)):
        return target
    return Reference(_unit_name(target, local_name))


def _unit_name(name: Any, local_name: Any) -> str:
    if not isinstance(name, str):
        raise InvalidArgument(
            f"Dependency '{local_name}' must name a unit with a string, got {name!r}"
        )
    return name
