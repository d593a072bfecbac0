"""TypeDescriptor Protocol: the extension point for teaching the comparator new types.

A descriptor tells the comparator how to treat every instance of a type:
which ``ValueKind`` it is, whether scalars are ordered, how to enumerate a
Composite's members and how to materialize a Sequence's elements.  Users can
register their own descriptors without inheriting from any base class:
any object with the right attributes passes ``isinstance`` checks.

Example::

    from operator import attrgetter
    from struct_compare.introspection import Member, ValueKind
    from struct_compare.protocols import TypeDescriptor

    class PointDescriptor:
        kind = ValueKind.COMPOSITE
        ordered = False

        def members(self, value):
            return [Member("x", attrgetter("x")), Member("y", attrgetter("y"))]

        def elements(self, value):
            raise TypeError("points are not sequences")

    assert isinstance(PointDescriptor(), TypeDescriptor)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from struct_compare.introspection.kinds import ValueKind
    from struct_compare.introspection.members import Member

__all__ = ["TypeDescriptor"]


@runtime_checkable
class TypeDescriptor(Protocol):
    """Structural protocol for per-type comparison descriptors.

    Attributes:
        kind:    The ``ValueKind`` of every instance of the described type.
        ordered: For SCALAR kinds, whether instances carry a total ordering
                 (compared with ``<``/``>`` instead of ``==``).

    The ``members`` method is only called for COMPOSITE kinds and the
    ``elements`` method only for SEQUENCE kinds.  ``elements`` must return a
    new list holding the elements in a stable order.
    """

    kind: ValueKind
    ordered: bool

    def members(self, value: Any) -> list[Member]: ...

    def elements(self, value: Any) -> list[Any]: ...
