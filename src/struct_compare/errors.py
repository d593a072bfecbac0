"""Exceptions raised by struct-compare.

A mismatch is never an error: it yields ``False``.  These exceptions signal
that two values could not be compared at all.
"""

from __future__ import annotations

__all__ = [
    "CycleDetectedError",
    "IncomparableTypesError",
    "MaxDepthExceededError",
    "StructCompareError",
]


class StructCompareError(Exception):
    """Base class for all struct-compare errors.

    Attributes:
        path: Dotted member path where the problem was found ("" for the root).
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        where = path or "<root>"
        super().__init__(f"{message} (at {where})")


class IncomparableTypesError(StructCompareError, TypeError):
    """Counterpart values have types that cannot be compared with each other."""

    def __init__(self, left_type: type, right_type: type, path: str = "") -> None:
        self.left_type = left_type
        self.right_type = right_type
        super().__init__(
            f"cannot compare {left_type.__qualname__} with {right_type.__qualname__}",
            path,
        )


class CycleDetectedError(StructCompareError):
    """The object graph re-entered a pair of values already being compared."""


class MaxDepthExceededError(StructCompareError, RecursionError):
    """The object graph is nested deeper than the configured ``max_depth``."""
