"""Extension slots and the contributions units register against them.

A slot is an extension point identified by a unique id. Any unit may contribute
a value to a slot by decorating its factory with :func:`contributes`; a unit that
depends on :func:`assemblage.descriptors.contribution_of` receives every
contribution made to that slot across the whole system.
"""

import uuid
from typing import Any, Callable, Optional
from uuid import UUID

from assemblage.errors import InvalidArgument

__all__ = ["ExtensionSlot", "slot_id", "contributes", "collect"]

_CONTRIBUTIONS_ATTRIBUTE = "__contributions__"


class ExtensionSlot:
    """A named extension point with a unique identity.

    Two slots created with the same name are still distinct slots.

    Example:
        >>> routes = ExtensionSlot("routes")
        >>> @contributes(routes, "/health")
        ... def make_health_check():
        ...     return HealthCheck()
    """

    def __init__(self, name: str):
        self.name = name
        self.id = uuid.uuid4()

    def __repr__(self) -> str:
        return f"ExtensionSlot({self.name!r})"


def slot_id(slot: Any) -> Optional[UUID]:
    """Return the identity of a slot, or None if the argument is not a slot."""
    if isinstance(slot, ExtensionSlot):
        return slot.id
    return None


def contributes(slot: ExtensionSlot, value: Any) -> Callable:
    """Decorator recording ``value`` as the decorated object's contribution to ``slot``.

    Args:
        slot: The slot being contributed to.
        value: The contributed value.

    Returns:
        A decorator returning its target unchanged apart from the recorded contribution.

    Raises:
        InvalidArgument: If ``slot`` is not an extension slot, or the target cannot
            carry attributes.
    """
    identity = slot_id(slot)
    if identity is None:
        raise InvalidArgument(f"{slot!r} is not an extension slot")

    def decorator(target: Any) -> Any:
        contributions = dict(_own_contributions(target))
        contributions[identity] = value
        try:
            setattr(target, _CONTRIBUTIONS_ATTRIBUTE, contributions)
        except AttributeError:
            raise InvalidArgument(
                f"{target!r} cannot carry contributions to {slot!r}"
            ) from None
        return target

    return decorator


def collect(slot: ExtensionSlot, target: Any) -> Any:
    """Return the contribution ``target`` made to ``slot``, or None if it made none."""
    return _own_contributions(target).get(slot_id(slot))


def _own_contributions(target: Any) -> dict:
    # Contributions are never inherited from a class by its subclasses or instances.
    try:
        return vars(target).get(_CONTRIBUTIONS_ATTRIBUTE, {})
    except TypeError:
        return {}
