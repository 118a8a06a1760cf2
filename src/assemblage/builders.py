"""High level entry points for assembling systems."""

import logging

from assemblage.definitions import SystemDefinition, normalize_definitions
from assemblage.manifest import Manifest, ManifestBuilder
from assemblage.system import System, make_registry
from assemblage.unit_builder import UnitBuilder

__all__ = ["make_manifest", "make_system"]

logger = logging.getLogger(__name__)


def make_manifest(
    definition: SystemDefinition, allow_duplicates: bool = True
) -> Manifest:
    """Create a :class:`Manifest` describing how ``definition`` would be assembled.

    Nothing is instantiated; this is useful for inspecting or validating a system
    definition ahead of time.

    Args:
        definition: A mapping of unit names to raw values, or a list of
            ``(name, value)`` pairs.
        allow_duplicates: Whether a repeated unit name replaces the earlier one
            rather than being rejected.

    Returns:
        The resolved :class:`Manifest`.

    Raises:
        InvalidArgument: If the definition is malformed.
        DependencyError: If dependencies are missing or cyclic.

    Example:
        >>> manifest = make_manifest({"a": 1, "b": using_deps(["a"], lambda a: a + 1)})
        >>> [d.name for d in manifest.build_order]
        ['a', 'b']
    """
    definitions = normalize_definitions(definition, allow_duplicates)
    return ManifestBuilder().build(definitions)


def make_system(definition: SystemDefinition, allow_duplicates: bool = True) -> System:
    """Construct and return a fully wired :class:`System`.

    Units are normalised, ordered so that every unit follows the units it
    references, and instantiated exactly once each. Either every unit is built
    or an error is raised and nothing is returned.

    Args:
        definition: A mapping of unit names to raw values, or a list of
            ``(name, value)`` pairs. Values may be built with
            :func:`assemblage.descriptors.using_deps`, be callables taking no
            arguments, or be constants.
        allow_duplicates: Whether a repeated unit name replaces the earlier one
            rather than being rejected.

    Returns:
        The instantiated :class:`System`.

    Raises:
        InvalidArgument: If the definition is malformed.
        UnsatisfiedDependencyError: If a unit references an undeclared unit.
        CircularDependencyError: If units reference each other in a cycle.

    Example:
        >>> system = make_system({"a": lambda: 1, "b": using_deps(["a"], lambda a: a + 1)})
        >>> system.b
        2
    """
    manifest = make_manifest(definition, allow_duplicates)
    system = make_registry(UnitBuilder().build(manifest))
    logger.info("Assembled system of %d unit(s)", len(system))
    return system
