"""Built-in TypeDescriptor implementations, one per ValueKind.

Each descriptor is a frozen dataclass satisfying the ``TypeDescriptor``
Protocol structurally.  Descriptors are stateless and safe to share across
threads and registries.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from struct_compare.introspection.kinds import ValueKind
from struct_compare.introspection.members import Member, public_members

__all__ = [
    "CompositeDescriptor",
    "ScalarDescriptor",
    "SequenceDescriptor",
    "UnsupportedDescriptor",
    "mapping_items",
    "ndarray_elements",
]


def mapping_items(value: Mapping[Any, Any]) -> list[Any]:
    """Materialize a mapping as its ``(key, value)`` pairs in iteration order."""
    return list(value.items())


def ndarray_elements(value: np.ndarray) -> list[Any]:
    """Materialize an array along its first axis; a 0-d array has one element."""
    if value.ndim == 0:
        return [value[()]]
    return list(value)


@dataclass(frozen=True, slots=True)
class ScalarDescriptor:
    """Descriptor for values compared as a whole.

    Attributes:
        ordered: When True, equality is decided by a three-way ordering
            (``<`` / ``>``); otherwise by ``==``.
    """

    kind: ClassVar[ValueKind] = ValueKind.SCALAR
    ordered: bool = False

    def members(self, value: Any) -> list[Member]:
        return []

    def elements(self, value: Any) -> list[Any]:
        raise TypeError(f"scalar value of type {type(value)!r} has no elements")


@dataclass(frozen=True, slots=True)
class SequenceDescriptor:
    """Descriptor for ordered, finite iterables.

    Attributes:
        materialize: Callable turning a value into its elements.  Defaults to
            ``list``; stream-like values (generators, iterators) are consumed.
    """

    kind: ClassVar[ValueKind] = ValueKind.SEQUENCE
    ordered: ClassVar[bool] = False
    materialize: Callable[[Any], Any] = list

    def members(self, value: Any) -> list[Member]:
        return []

    def elements(self, value: Any) -> list[Any]:
        items = self.materialize(value)
        return items if isinstance(items, list) else list(items)


@dataclass(frozen=True, slots=True)
class CompositeDescriptor:
    """Descriptor for aggregates compared member by member.

    Attributes:
        member_source: Callable enumerating a value's members.  Defaults to
            ``public_members`` (reflective discovery on every call).
    """

    kind: ClassVar[ValueKind] = ValueKind.COMPOSITE
    ordered: ClassVar[bool] = False
    member_source: Callable[[Any], list[Member]] = public_members

    def members(self, value: Any) -> list[Member]:
        return self.member_source(value)

    def elements(self, value: Any) -> list[Any]:
        raise TypeError(f"composite value of type {type(value)!r} has no elements")


@dataclass(frozen=True, slots=True)
class UnsupportedDescriptor:
    """Descriptor for values that can never compare equal."""

    kind: ClassVar[ValueKind] = ValueKind.UNSUPPORTED
    ordered: ClassVar[bool] = False

    def members(self, value: Any) -> list[Member]:
        return []

    def elements(self, value: Any) -> list[Any]:
        raise TypeError(f"unsupported value of type {type(value)!r} has no elements")
