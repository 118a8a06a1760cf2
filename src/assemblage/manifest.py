"""Resolution of unit definitions into a dependency-ordered build plan."""

import logging
from dataclasses import dataclass
from typing import Iterator

from assemblage.domain import Reference, UnitDefinition
from assemblage.errors import CircularDependencyError, UnsatisfiedDependencyError

__all__ = ["Manifest", "ManifestBuilder", "toposort"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifest:
    """The resolved plan for assembling a system.

    Attributes:
        definitions: Every unit definition, in declaration order. Contributions are
            collected over this list.
        build_order: The same definitions, ordered so that every referenced unit
            precedes the units referencing it.
    """

    definitions: list[UnitDefinition]
    build_order: list[UnitDefinition]


class ManifestBuilder:
    """Build a :class:`Manifest` from normalised unit definitions."""

    def build(self, definitions: list[UnitDefinition]) -> Manifest:
        """Resolve the build order of ``definitions``.

        Raises:
            UnsatisfiedDependencyError: If a unit references an undeclared unit.
            CircularDependencyError: If units reference each other in a cycle.
        """
        build_order = toposort(definitions)
        logger.debug(
            "Resolved build order: %s", ", ".join(d.name for d in build_order)
        )
        return Manifest(list(definitions), build_order)


def toposort(definitions: list[UnitDefinition]) -> list[UnitDefinition]:
    """Order unit definitions so that each follows every unit it references.

    Only :class:`Reference` dependencies constrain the order; contribution requests
    are ignored. The traversal is depth-first, starting from each definition in turn,
    so a given input order always yields the same result.

    Args:
        definitions: Unit definitions with distinct names.

    Returns:
        A permutation of ``definitions``.

    Raises:
        UnsatisfiedDependencyError: If a reference names a unit that is not among
            ``definitions``.
        CircularDependencyError: If a reference leads back to a unit on the current
            path. The error carries the cycle, e.g. ``["a", "b", "a"]``.
    """
    definitions_by_name = {definition.name: definition for definition in definitions}
    sorted_definitions: list[UnitDefinition] = []
    visited: set[str] = set()

    for root in definitions:
        if root.name in visited:
            continue
        visited.add(root.name)

        path: list[UnitDefinition] = [root]
        on_path = {root.name}
        pending: list[Iterator[tuple[str, Reference]]] = [iter(root.references())]

        while pending:
            try:
                dependency_name, reference = next(pending[-1])
            except StopIteration:
                pending.pop()
                finished = path.pop()
                on_path.discard(finished.name)
                sorted_definitions.append(finished)
                continue

            dependent = path[-1]
            target = definitions_by_name.get(reference.unit_name)
            if target is None:
                raise UnsatisfiedDependencyError(
                    dependent.name, dependency_name, reference.unit_name
                )
            if target.name in on_path:
                names = [definition.name for definition in path]
                raise CircularDependencyError(
                    names[names.index(target.name):] + [target.name]
                )
            if target.name in visited:
                continue

            visited.add(target.name)
            path.append(target)
            on_path.add(target.name)
            pending.append(iter(target.references()))

    return sorted_definitions
