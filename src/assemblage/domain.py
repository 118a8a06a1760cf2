"""Domain models used throughout the assembler."""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from assemblage.extensions import ExtensionSlot


@dataclass(frozen=True)
class Reference:
    """A dependency on the instance of another unit.

    Attributes:
        unit_name: The name of the unit whose instance is injected.
    """

    unit_name: str


@dataclass(frozen=True)
class ContributionRequest:
    """A dependency on every contribution registered for an extension slot.

    Attributes:
        slot: The slot whose contributions are collected.
    """

    slot: ExtensionSlot


DependencyDescriptor = Union[Reference, ContributionRequest]
"""Describes how a single local dependency of a unit is resolved."""


@dataclass(frozen=True)
class UnitDescriptor:
    """A factory together with its declared dependencies, not yet bound to a name.

    Produced by :func:`assemblage.descriptors.using_deps` and consumed by the
    definition normaliser, which attaches the unit name.

    Attributes:
        factory: Called with the resolved dependencies as keyword arguments.
        dependencies: Mapping of local dependency names to descriptors.
    """

    factory: Callable[..., Any]
    dependencies: Mapping[str, DependencyDescriptor]


@dataclass(frozen=True)
class UnitDefinition:
    """The canonical, pre-instantiation record of a unit.

    Attributes:
        name: Unique name of the unit within one assembly.
        factory: Called with the resolved dependencies as keyword arguments.
        dependencies: Mapping of local dependency names to descriptors.
        origin: The object supplied for the unit; inspected when collecting
            contributions.
    """

    name: str
    factory: Callable[..., Any]
    dependencies: Mapping[str, DependencyDescriptor]
    origin: Any

    def references(self) -> list[tuple[str, Reference]]:
        """Return the (local name, reference) pairs which constrain build order."""
        return [
            (dependency_name, descriptor)
            for dependency_name, descriptor in self.dependencies.items()
            if isinstance(descriptor, Reference)
        ]


@dataclass(frozen=True)
class InstantiatedUnit:
    """A unit definition together with the instance its factory produced."""

    definition: UnitDefinition
    instance: Any

    @property
    def name(self) -> str:
        return self.definition.name
