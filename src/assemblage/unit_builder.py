"""Instantiation of units in dependency order."""

import logging
from typing import Any

from assemblage.domain import (
    ContributionRequest,
    DependencyDescriptor,
    InstantiatedUnit,
    Reference,
    UnitDefinition,
)
from assemblage.extensions import collect
from assemblage.manifest import Manifest

__all__ = ["UnitBuilder"]

logger = logging.getLogger(__name__)


class UnitBuilder:
    """Invoke the factory of every unit in a :class:`Manifest` exactly once."""

    def build(self, manifest: Manifest) -> list[InstantiatedUnit]:
        """Instantiate all units in the manifest's build order.

        Each factory is called with its resolved dependencies as keyword arguments.
        Referenced units are always built before the units referencing them, and
        contribution requests see every unit in the manifest, built or not.

        Args:
            manifest: The resolved build plan.

        Returns:
            The instantiated units, in build order.
        """
        instances: dict[str, Any] = {}
        built: list[InstantiatedUnit] = []

        for definition in manifest.build_order:
            resolved = {
                dependency_name: self._resolve(
                    descriptor, instances, manifest.definitions
                )
                for dependency_name, descriptor in definition.dependencies.items()
            }
            logger.debug(
                "Instantiating unit '%s' with dependencies %s",
                definition.name,
                list(resolved),
            )
            instance = definition.factory(**resolved)
            instances[definition.name] = instance
            built.append(InstantiatedUnit(definition, instance))

        return built

    def _resolve(
        self,
        descriptor: DependencyDescriptor,
        instances: dict[str, Any],
        definitions: list[UnitDefinition],
    ) -> Any:
        if isinstance(descriptor, Reference):
            return instances[descriptor.unit_name]
        if isinstance(descriptor, ContributionRequest):
            return _collect_contributions(descriptor, definitions)
        raise TypeError(f"Unknown dependency descriptor {descriptor!r}")


def _collect_contributions(
    request: ContributionRequest, definitions: list[UnitDefinition]
) -> list[Any]:
    contributions = [
        contribution
        for contribution in (
            collect(request.slot, definition.origin) for definition in definitions
        )
        if contribution is not None
    ]
    logger.debug(
        "Collected %d contribution(s) for %r", len(contributions), request.slot
    )
    return contributions
