"""Member discovery for Composite values.

A member is a public (no leading underscore), readable attribute of an
object.  Members are discovered from the object's class and instance state
on every call; nothing is cached, so attributes added after construction
are always seen.

Discovery order (stable, used for deterministic diagnostics):

1. dataclass fields, in declaration order
2. ``__slots__`` entries, base class first
3. instance ``__dict__`` keys, in assignment order
4. ``property`` / ``functools.cached_property`` definitions with a getter,
   base class first, in definition order

A name seen twice keeps its first position.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cached_property
from operator import attrgetter
from typing import Any

__all__ = ["Member", "named_members", "public_members", "slot_names"]


@dataclass(frozen=True, slots=True)
class Member:
    """A named, readable attribute of a Composite.

    Attributes:
        name:   Attribute name as used by the member filters.
        getter: Callable returning the attribute's value for a given object.
    """

    name: str
    getter: Callable[[Any], Any]

    def read(self, obj: Any) -> Any:
        return self.getter(obj)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def slot_names(klass: type) -> tuple[str, ...]:
    slots = vars(klass).get("__slots__", ())
    if isinstance(slots, str):
        return (slots,)
    return tuple(slots)


def _slot_getter(name: str) -> Callable[[Any], Any]:
    # An unset slot reads as absent.
    def _read(obj: Any) -> Any:
        return getattr(obj, name, None)

    return _read


def public_members(obj: Any) -> list[Member]:
    """Return the public readable members of ``obj`` in discovery order.

    Args:
        obj: Any object; classes without instance state yield only their
            properties.

    Returns:
        A new list of ``Member`` objects.  Callers own the list.
    """
    cls = type(obj)
    found: dict[str, Member] = {}

    def _add(name: str, getter: Callable[[Any], Any]) -> None:
        if _is_public(name) and name not in found:
            found[name] = Member(name=name, getter=getter)

    if dataclasses.is_dataclass(obj):
        for f in dataclasses.fields(obj):
            _add(f.name, attrgetter(f.name))

    mro = tuple(reversed(cls.__mro__))

    for klass in mro:
        for slot in slot_names(klass):
            _add(slot, _slot_getter(slot))

    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name in instance_dict:
            _add(name, attrgetter(name))

    for klass in mro:
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None:
                _add(name, attrgetter(name))
            elif isinstance(attr, cached_property):
                _add(name, attrgetter(name))

    return list(found.values())


def named_members(names: Iterable[str]) -> Callable[[Any], list[Member]]:
    """Build a member source that always yields ``names`` in the given order."""
    ordered = tuple(dict.fromkeys(names))

    def _members(obj: Any) -> list[Member]:
        return [Member(name=name, getter=attrgetter(name)) for name in ordered]

    return _members
