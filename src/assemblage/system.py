"""
The read-only registry of instantiated units returned by the assembler.

Units are exposed both as attributes and as items:

    >>> system = make_system({"greeting": "hello"})
    >>> system.greeting
    'hello'
    >>> system["greeting"]
    'hello'

Item access always works; attribute access is shadowed for unit names that clash
with :class:`collections.abc.Mapping` methods such as ``keys`` or ``get``.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator

from assemblage.domain import InstantiatedUnit

__all__ = ["System", "make_registry"]


class System(Mapping):
    """An immutable mapping from unit names to unit instances."""

    __slots__ = ("_instances",)

    def __init__(self, instances: Mapping[str, Any]):
        object.__setattr__(self, "_instances", MappingProxyType(dict(instances)))

    def __getitem__(self, name: str) -> Any:
        return self._instances[name]

    def __getattr__(self, name: str) -> Any:
        if name == "_instances":
            raise AttributeError(name)
        try:
            return self._instances[name]
        except KeyError:
            raise AttributeError(f"System has no unit '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot assign unit '{name}': systems are read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot remove unit '{name}': systems are read-only")

    def __iter__(self) -> Iterator[str]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._instances))

    def __repr__(self) -> str:
        return f"System({list(self._instances)})"


def make_registry(units: list[InstantiatedUnit]) -> System:
    """Project instantiated units into a :class:`System`.

    Units are exposed in the given order. Should a name occur more than once, the
    last unit with that name wins.
    """
    instances: dict[str, Any] = {}
    for unit in units:
        instances[unit.name] = unit.instance
    return System(instances)
