"""ValueKind StrEnum: the four ways a runtime value can be compared.

Classification depends only on the value's runtime type, never on its
contents, so every instance of a type (and ``None``) always lands in the
same kind.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["ValueKind"]


class ValueKind(StrEnum):
    """Enumeration of the comparison kinds.

    StrEnum values are the lowercased member names:
    - SCALAR      -> "scalar"      : compared by ordering or ``==``
    - SEQUENCE    -> "sequence"    : compared element by element, in order
    - COMPOSITE   -> "composite"   : compared member by member
    - UNSUPPORTED -> "unsupported" : never equal
    """

    SCALAR = auto()
    SEQUENCE = auto()
    COMPOSITE = auto()
    UNSUPPORTED = auto()
