"""Normalisation of raw system definitions into :class:`UnitDefinition` records."""

from collections.abc import Mapping
from typing import Any, Iterable, Union

from assemblage.domain import UnitDefinition, UnitDescriptor
from assemblage.errors import InvalidArgument

__all__ = ["SystemDefinition", "normalize_definitions"]


SystemDefinition = Union[
    Mapping[str, Any], list[tuple[str, Any]], tuple[tuple[str, Any], ...]
]
"""Raw input to the assembler: a mapping of unit names to values, or a sequence of pairs.

Each value may be a :class:`UnitDescriptor`, a callable taking no arguments, or any
other object, which is treated as a constant.
"""


def normalize_definitions(
    definition: SystemDefinition, allow_duplicates: bool = True
) -> list[UnitDefinition]:
    """Turn a raw system definition into unit definitions, in declaration order.

    Args:
        definition: A mapping of names to raw values, or a list of ``(name, value)`` pairs.
        allow_duplicates: When True a repeated name replaces the earlier definition
            while keeping its position; when False it is rejected.

    Returns:
        One :class:`UnitDefinition` per distinct unit name.

    Raises:
        InvalidArgument: If the definition is not a mapping or a sequence of
            name/value pairs, or if a name is repeated and duplicates are not allowed.
    """
    definitions_by_name: dict[str, UnitDefinition] = {}

    for name, raw in _entries(definition):
        if name in definitions_by_name and not allow_duplicates:
            raise InvalidArgument(f"Duplicate unit name '{name}'")
        definitions_by_name[name] = _unit_definition(name, raw)

    return list(definitions_by_name.values())


def _entries(definition: SystemDefinition) -> Iterable[tuple[str, Any]]:
    if isinstance(definition, Mapping):
        entries = list(definition.items())
    elif isinstance(definition, (list, tuple)):
        entries = list(definition)
        for entry in entries:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise InvalidArgument(
                    f"Expected a (name, value) pair in the system definition, got {entry!r}"
                )
    else:
        raise InvalidArgument(
            "The system definition must be a mapping or a list of (name, value) "
            "pairs declaring the units"
        )

    for name, _ in entries:
        if not isinstance(name, str):
            raise InvalidArgument(f"Unit names must be strings, got {name!r}")

    return entries


def _unit_definition(name: str, raw: Any) -> UnitDefinition:
    if isinstance(raw, UnitDescriptor):
        return UnitDefinition(name, raw.factory, dict(raw.dependencies), raw.factory)
    if callable(raw):
        return UnitDefinition(name, raw, {}, raw)
    return UnitDefinition(name, _constant(raw), {}, raw)


def _constant(value: Any):
    def factory():
        return value

    return factory
